import pytest

from unlearnviz.model.classifier import Label
from unlearnviz.model.points import DataPoint
from unlearnviz.model.state import ViewState, VisualizationState


class TestVisualizationState:
    def test_starts_empty(self):
        state = VisualizationState.create()

        assert state.view_state is ViewState.EMPTY
        assert not state.can_forget
        assert state.accuracy() is None

    def test_add_moves_to_populated(self):
        state = VisualizationState.create(seed=1)
        state.add_point()

        assert state.view_state is ViewState.POPULATED
        assert state.accuracy() == 100.0

    def test_same_seed_same_points(self):
        a = VisualizationState.create(seed=42)
        b = VisualizationState.create(seed=42)
        for _ in range(4):
            a.add_point()
            b.add_point()

        assert a.store.points == b.store.points

    def test_forget_scenario(self, three_points):
        state = VisualizationState.create(initial_points=three_points)
        state.toggle(1)

        removed = state.forget_selected()

        assert removed == [three_points[1]]
        assert state.store.points == (
            DataPoint(1.0, 1.0, Label.POSITIVE),
            DataPoint(2.0, -1.0, Label.POSITIVE),
        )
        assert state.selection == set()

    @pytest.mark.parametrize("selected", [[0], [2, 0], [0, 1, 2]])
    def test_forget_always_clears_selection(self, three_points, selected):
        state = VisualizationState.create(initial_points=three_points)
        for i in selected:
            state.toggle(i)

        state.forget_selected()

        assert state.selection.is_empty()
        assert len(state.store) == 3 - len(selected)

    def test_forget_all_returns_to_empty(self, three_points):
        state = VisualizationState.create(initial_points=three_points)
        for i in range(3):
            state.toggle(i)

        state.forget_selected()

        assert state.view_state is ViewState.EMPTY
        assert state.accuracy() is None

    def test_can_forget_follows_selection(self, three_points):
        state = VisualizationState.create(initial_points=three_points)
        state.toggle(0)
        assert state.can_forget
        state.toggle(0)
        assert not state.can_forget

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_toggle_out_of_range(self, three_points, index):
        state = VisualizationState.create(initial_points=three_points)

        with pytest.raises(ValueError):
            state.toggle(index)

    def test_projection_reflects_store(self, three_points):
        state = VisualizationState.create(initial_points=three_points)

        assert len(state.projection().positive) == 2
        assert len(state.projection().negative) == 1
