from __future__ import annotations

import plotly.graph_objects as go

from series import TemperatureSeries


def build_series_figure(series: TemperatureSeries, *, height: int = 500) -> go.Figure:
    fig = go.Figure()
    y_min, y_max = -10.0, 40.0  # default bounds if empty

    if len(series) > 0:
        s = series.to_series()
        stats = series.summary_statistics()
        # Highlight the extreme readings
        is_extreme = (s == stats.min_temp) | (s == stats.max_temp)
        marker_colors = ["#d32f2f" if e else "#1976d2" for e in is_extreme]
        marker_sizes = [10 if e else 6 for e in is_extreme]
        fig.add_trace(
            go.Scatter(
                x=s.index,
                y=s,
                mode="lines+markers",
                name="Temperature (°C)",
                line=dict(color="#1976d2"),
                marker=dict(size=marker_sizes, color=marker_colors),
            )
        )

        # Shaded band of one deviation around the average
        if stats.dev_temp > 0:
            fig.add_hrect(
                y0=stats.avg_temp - stats.dev_temp,
                y1=stats.avg_temp + stats.dev_temp,
                fillcolor="rgba(25,118,210,0.08)",
                line_width=0,
                layer="below",
            )
        fig.add_hline(y=stats.avg_temp, line_dash="dash", line_color="#616161", line_width=2)
        # Label on the y-axis for the average
        fig.add_annotation(
            xref="paper",
            x=0,
            xanchor="right",
            xshift=-16,
            yref="y",
            y=stats.avg_temp,
            text=f"avg {stats.avg_temp:.1f}°C",
            font=dict(color="#616161", size=12),
            showarrow=False,
            align="right",
            bgcolor="rgba(0,0,0,0)",
        )

        spread = max(stats.max_temp - stats.min_temp, 1.0)
        y_min = stats.min_temp - 0.1 * spread
        y_max = stats.max_temp + 0.1 * spread

    fig.update_layout(
        template="simple_white",
        height=height,
        margin=dict(l=80, r=20, t=40, b=40),
        showlegend=False,
        xaxis_title="Reading",
        yaxis_title="Temperature (°C)",
    )
    fig.update_yaxes(range=[y_min, y_max])
    return fig
