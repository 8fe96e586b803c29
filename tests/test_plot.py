import numpy as np
import plotly.graph_objects as go

from fiers import MaxMin, create_uniform_triangle_memberships
from fiers.plot import plot_membership_functions


def test_plot_membership_functions():
    bp = MaxMin()
    level = bp.add_input("level", 0.0, 150.0, 31)
    for i, mf in enumerate(create_uniform_triangle_memberships(0.0, 150.0, 4)):
        level.add_term(f"level-{i}", mf)
    flow = bp.add_input("flow", 0.0, 4000.0)
    for i, mf in enumerate(create_uniform_triangle_memberships(0.0, 4000.0, 3)):
        flow.add_term(f"flow-{i}", mf)

    fig = plot_membership_functions(level, flow, show=False)
    assert isinstance(fig, go.Figure)
    assert [t.name for t in fig.data] == [
        "level-0",
        "level-1",
        "level-2",
        "level-3",
        "flow-0",
        "flow-1",
        "flow-2",
    ]
    assert len(fig.data[0].x) == 31
    assert len(fig.data[-1].x) == 101
    assert np.all(np.asarray(fig.data[0].y) <= 1.0)


def test_plot_sample_override():
    bp = MaxMin()
    x = bp.add_input("x", -1.0, 1.0)
    x.add_term("zero", create_uniform_triangle_memberships(-1.0, 1.0, 3)[1])
    fig = plot_membership_functions(x, discrete_points=7, show=False)
    assert len(fig.data) == 1
    assert np.allclose(fig.data[0].x, np.linspace(-1.0, 1.0, 7))
