import plotly.graph_objects as go

from modules.config import Config


def apply_chart_style(fig, title=None):
    fig.update_layout(
        template=Config.CHART_TEMPLATE,
        height=Config.CHART_HEIGHT,
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
        title=dict(
            text=title,
            font=dict(family="Rajdhani", size=24, color="#f0f6fc")
        ) if title else None,
        font=dict(family="Inter", size=12, color="#c9d1d9"),
        xaxis=dict(showgrid=False, zeroline=False, showline=True, linecolor='#30363d', title='Time (s)'),
        yaxis=dict(showgrid=True, gridcolor='rgba(255,255,255,0.05)', zeroline=False),
        margin=dict(l=20, r=20, t=50, b=20),
        hovermode="x unified"
    )
    return fig


def series_trace(record):
    """Scatter trace for one serialized chart record (x in seconds)."""
    points = record["data"]
    decimals = record.get("valueDecimals", Config.VALUE_DECIMALS)
    return go.Scatter(
        x=[t / 1000 if t is not None else None for t, _ in points],
        y=[v for _, v in points],
        name=record["name"],
        mode='lines',
        visible=True if record["visible"] else 'legendonly',
        opacity=record.get("opacity", 1),
        line=dict(
            color=record.get("color"),
            dash='dash' if record.get("dashStyle") == "Dash" else 'solid',
            shape='spline' if record.get("seriesType") == "spline" else 'linear',
        ),
        connectgaps=False,
        hovertemplate=f"%{{y:.{decimals}f}}{record.get('valueSuffix', '')}<extra>{record['name']}</extra>",
    )


def build_shot_figure(series, stages=None, title=None):
    """Plotly figure from serialized chart records and stage markers.

    Args:
        series: Records produced by modules.chart_exporters.for_chart
        stages: StageMarker list, drawn as dotted vertical lines
        title: Optional chart title
    """
    fig = go.Figure()
    for record in series:
        fig.add_trace(series_trace(record))
    for stage in stages or []:
        fig.add_vline(
            x=stage.timestamp_ms / 1000,
            line=dict(color=Config.COLOR_STAGE, width=1, dash='dot'),
        )
    return apply_chart_style(fig, title)
