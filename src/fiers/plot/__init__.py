from typing import Optional

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from ..blueprint import FuzzyVariable
from ..range import DiscreteRange


def plot_membership_functions(
    *variables: FuzzyVariable,
    discrete_points: Optional[int] = None,
    show: bool = True,
) -> go.Figure:
    """Draw every term of each variable over its universe of discourse.

    Parameters
    ----------
    variables: FuzzyVariable
        One subplot is created per variable, one trace per term.
    discrete_points: int | None
        Override the sample count of each variable's range.
    show: bool
        Call ``fig.show()`` before returning.
    """
    fig = make_subplots(
        rows=max(1, len(variables)),
        cols=1,
        subplot_titles=[f"Membership Functions of {v.name}" for v in variables],
    )
    for i_plot, variable in enumerate(variables):
        if discrete_points is None:
            universe = variable.universe()
        else:
            universe = DiscreteRange(
                variable.range.start, variable.range.end, discrete_points
            )
        x = universe.to_array()
        for term in variable.terms:
            fig.add_trace(
                go.Scatter(x=x, y=term.mf.mu(x), mode="lines", name=term.name),
                row=i_plot + 1,
                col=1,
            )
        fig.update_yaxes(range=[0.0, 1.05], row=i_plot + 1, col=1)

    fig.update_layout(
        title="Membership Functions",
        template="plotly_white",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )

    if show:
        fig.show()
    return fig
