"""Plotly polar compass showing the Qibla bearing relative to the device heading."""

import numpy as np
import plotly.graph_objects as go

from adhantimes.models import QiblaResult
from adhantimes.qibla import relative_rotation

_BG = "#0d1b35"
_TICK_COLOR = "#7ec8e3"
_NEEDLE_COLOR = "#c9a96e"


def render_compass(qibla: QiblaResult, heading_deg: float | None = None) -> go.Figure:
    """Render a compass dial with a needle pointing at the Qibla.

    The dial is drawn in the device frame: 0° is the top of the screen, so the
    needle sits at bearing − heading.

    Args:
        qibla: Computed Qibla bearing.
        heading_deg: Device compass heading; None when no sensor is available.

    Returns:
        Plotly Figure object.
    """
    rotation = relative_rotation(qibla.bearing_deg, heading_deg) % 360

    # Minor ticks every 15°, major every 45°
    ticks = np.arange(0, 360, 15)
    tick_len = np.where(ticks % 45 == 0, 0.18, 0.08)
    tick_r: list[float | None] = []
    tick_theta: list[float | None] = []
    for theta, length in zip(ticks, tick_len):
        tick_r += [1.0, 1.0 - float(length), None]
        tick_theta += [float(theta), float(theta), None]

    tick_trace = go.Scatterpolar(
        r=tick_r,
        theta=tick_theta,
        mode="lines",
        line=dict(color=_TICK_COLOR, width=1),
        hoverinfo="skip",
        name="ticks",
    )

    needle_trace = go.Scatterpolar(
        r=[0, 0.85],
        theta=[rotation, rotation],
        mode="lines+markers",
        line=dict(color=_NEEDLE_COLOR, width=4),
        marker=dict(size=[6, 14], symbol=["circle", "diamond"]),
        hovertemplate=f"Qibla {qibla.bearing_deg:.0f}°<extra></extra>",
        name="qibla",
    )

    fig = go.Figure(data=[tick_trace, needle_trace])
    fig.update_layout(
        showlegend=False,
        paper_bgcolor=_BG,
        margin=dict(l=20, r=20, t=20, b=20),
        width=320,
        height=320,
        polar=dict(
            bgcolor=_BG,
            radialaxis=dict(visible=False, range=[0, 1]),
            angularaxis=dict(
                rotation=90,
                direction="clockwise",
                tickmode="array",
                tickvals=[0, 90, 180, 270],
                ticktext=["N", "E", "S", "W"],
                tickfont=dict(color="#e8d5a3", size=14),
                showgrid=False,
                linecolor=_TICK_COLOR,
            ),
        ),
    )
    return fig
