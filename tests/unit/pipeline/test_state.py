"""Unit tests for pipeline state: navigation map, flags and generations."""
import pytest

from pipeline.state import Operation, PipelineState, PipelineStep, can_navigate


class TestNavigation:

    @pytest.mark.parametrize("current", list(PipelineStep))
    def test_profile_and_tracker_reachable_from_anywhere(self, current):
        assert can_navigate(current, PipelineStep.PROFILE)
        assert can_navigate(current, PipelineStep.TRACKER)

    @pytest.mark.parametrize("current", list(PipelineStep))
    def test_analysis_never_reachable_by_navigation(self, current):
        if current == PipelineStep.ANALYSIS:
            assert can_navigate(current, PipelineStep.ANALYSIS)
        else:
            assert not can_navigate(current, PipelineStep.ANALYSIS)

    def test_search_needs_discovery_from_profile(self):
        assert not can_navigate(PipelineStep.PROFILE, PipelineStep.SEARCH)
        assert can_navigate(PipelineStep.ANALYSIS, PipelineStep.SEARCH)
        assert can_navigate(PipelineStep.TRACKER, PipelineStep.SEARCH)


class TestPipelineState:

    def test_initial_state(self):
        state = PipelineState()
        assert state.step == PipelineStep.PROFILE
        assert not any(state.is_loading(op) for op in Operation)

    def test_begin_sets_flag_and_finish_clears_it(self):
        state = PipelineState()
        state.begin(Operation.REFINE)
        assert state.is_refining
        assert not state.is_chatting
        state.finish(Operation.REFINE)
        assert not state.is_refining

    def test_token_goes_stale_after_new_begin_or_invalidate(self):
        state = PipelineState()
        token = state.begin(Operation.CHAT)
        assert state.is_current(Operation.CHAT, token)

        state.invalidate(Operation.CHAT)
        assert not state.is_current(Operation.CHAT, token)

        newer = state.begin(Operation.CHAT)
        assert state.is_current(Operation.CHAT, newer)

    def test_generations_are_per_operation(self):
        state = PipelineState()
        token = state.begin(Operation.DISCOVER)
        state.begin(Operation.ANALYZE)
        assert state.is_current(Operation.DISCOVER, token)

    def test_selected_job_only_visible_on_analysis(self):
        state = PipelineState(selected_job_id="42")
        assert state.visible_selected_job_id is None
        state.step = PipelineStep.ANALYSIS
        assert state.visible_selected_job_id == "42"
