import plotly.graph_objects as go

COLORS = {
    "sedentaire": "99, 102, 241",
    "endurance": "16, 185, 129",
    "conservation": "245, 158, 11",
    "prise": "239, 68, 68",
}


def clean_layout(fig, title):
    fig.update_layout(
        template="plotly_dark",
        height=360,
        margin=dict(l=16, r=16, t=52, b=16),
        title=dict(text=title, x=0.02),
        font=dict(size=13),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    fig.update_xaxes(showgrid=True, gridcolor="rgba(255,255,255,0.08)", title="Poids (kg)")
    fig.update_yaxes(showgrid=True, gridcolor="rgba(255,255,255,0.08)", title="g/jour")
    return fig


def ranges_figure(plan, title="Protéines par jour selon le poids"):
    """One shaded min..max band per selected goal. None when there is nothing to draw."""
    if not plan.weights:
        return None

    fig = go.Figure()
    for g in plan.goals:
        rgb = COLORS.get(g.key, "148, 163, 184")
        low = [w * g.min for w in plan.weights]
        high = [w * g.max for w in plan.weights]
        fig.add_trace(go.Scatter(
            x=plan.weights, y=low, mode="lines", name=f"{g.label} (min)",
            line=dict(width=1, color=f"rgb({rgb})"), showlegend=False,
        ))
        fig.add_trace(go.Scatter(
            x=plan.weights, y=high, mode="lines", name=g.label, fill="tonexty",
            fillcolor=f"rgba({rgb}, 0.25)", line=dict(width=2, color=f"rgb({rgb})"),
        ))
    return clean_layout(fig, title)
