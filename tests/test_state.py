"""
Tests for the VolumeViewModel presenter and the ViewModelStore scope
"""

import logging

import pytest
from hypothesis import given, strategies as st

from boxvolume.app.scope import ViewModelStore
from boxvolume.app.state import VolumeViewModel
from boxvolume.model.volume import format_volume

dimensions = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)


class TestVolumeViewModel:
    """Test suite for VolumeViewModel."""

    def test_no_result_before_first_calculation(self, view_model):
        assert view_model.get_current() is None
        assert view_model.last_result is None
        assert view_model.subscriber_count == 0

    @pytest.mark.parametrize("dims, expected", [
        ((0, 0, 0), "0"),
        ((2, 3, 4), "24"),
        ((1.5, 2, 2), "6"),
        ((1, 1, 1.005), "1.01"),
        ((-2, 3, 4), "-24"),
        ((10, 10, 10), "1000"),
    ])
    def test_published_text(self, view_model, recorder, dims, expected):
        view_model.subscribe(recorder.record)
        view_model.calculate_volume(*dims)
        assert recorder.values == [expected]
        assert view_model.get_current() == expected
        assert view_model.last_result.display_text == expected

    @given(dimensions, dimensions, dimensions)
    def test_publishes_formatted_product(self, qapp, length, width, height):
        view_model = VolumeViewModel()
        view_model.calculate_volume(length, width, height)
        assert view_model.get_current() == format_volume(length * width * height)

    def test_signal_carries_display_text(self, view_model, recorder):
        view_model.volume_changed.connect(recorder.record)
        view_model.calculate_volume(2, 3, 4)
        assert recorder.values == ["24"]

    def test_identical_inputs_publish_identical_text(self, view_model, recorder):
        view_model.subscribe(recorder.record)
        view_model.calculate_volume(1.2, 3.4, 5.6)
        view_model.calculate_volume(1.2, 3.4, 5.6)
        assert len(recorder.values) == 2
        assert recorder.values[0] == recorder.values[1] == "22.85"

    def test_new_calculation_overwrites_previous(self, view_model):
        view_model.calculate_volume(2, 3, 4)
        view_model.calculate_volume(1, 1, 0.5)
        assert view_model.get_current() == "0.50"

    def test_subscribe_without_result_does_not_call(self, view_model, recorder):
        view_model.subscribe(recorder.record)
        assert recorder.values == []

    def test_late_subscriber_receives_current_result(self, view_model, recorder):
        view_model.calculate_volume(1.5, 2, 2)
        view_model.subscribe(recorder.record)
        assert recorder.values == ["6"]

    def test_every_subscriber_is_notified(self, view_model):
        calls = []
        view_model.subscribe(lambda v: calls.append(("a", v)))
        view_model.subscribe(lambda v: calls.append(("b", v)))
        view_model.calculate_volume(2, 3, 4)
        assert sorted(calls) == [("a", "24"), ("b", "24")]

    def test_unsubscribe_function(self, view_model, recorder):
        unsubscribe = view_model.subscribe(recorder.record)
        view_model.calculate_volume(1, 1, 1)
        unsubscribe()
        view_model.calculate_volume(2, 2, 2)
        assert recorder.values == ["1"]
        assert view_model.subscriber_count == 0
        # Second call is harmless
        unsubscribe()

    def test_state_is_read_only_for_views(self, view_model):
        view_model.calculate_volume(2, 3, 4)
        assert not hasattr(view_model, "publish")
        # Emitting from outside notifies listeners but never rewrites the held state
        view_model.volume_changed.emit("not a volume")
        assert view_model.get_current() == "24"
        assert view_model.last_result.display_text == "24"

    def test_non_finite_result_is_published_and_logged(self, view_model, caplog):
        with caplog.at_level(logging.WARNING, logger="boxvolume"):
            view_model.calculate_volume(1e200, 1e200, 1.0)
        assert view_model.get_current() == "Infinity"
        assert "not finite" in caplog.text

    def test_on_cleared_drops_subscribers(self, view_model, recorder):
        view_model.subscribe(recorder.record)
        view_model.on_cleared()
        view_model.calculate_volume(2, 3, 4)
        assert recorder.values == []
        assert view_model.subscriber_count == 0


class TestViewModelStore:
    """Test suite for ViewModelStore."""

    def test_get_creates_once(self, qapp):
        store = ViewModelStore()
        first = store.get_view_model(VolumeViewModel)
        second = store.get_view_model(VolumeViewModel)
        assert first is second
        assert len(store) == 1
        assert "VolumeViewModel" in store
        assert list(store.keys()) == ["VolumeViewModel"]

    def test_get_with_explicit_key_and_factory(self, qapp):
        store = ViewModelStore()
        calls = []

        def factory():
            calls.append(1)
            return VolumeViewModel()

        a = store.get("left", factory)
        b = store.get("left", factory)
        c = store.get("right", factory)
        assert a is b
        assert a is not c
        assert len(calls) == 2

    def test_factory_returning_none_raises(self):
        store = ViewModelStore()
        with pytest.raises(ValueError):
            store.get("broken", lambda: None)
        assert "broken" not in store

    def test_clear_tears_down_view_models(self, qapp, recorder):
        store = ViewModelStore()
        view_model = store.get_view_model(VolumeViewModel)
        view_model.subscribe(recorder.record)

        store.clear()

        assert len(store) == 0
        assert view_model.subscriber_count == 0
        assert store.get_view_model(VolumeViewModel) is not view_model

    def test_clear_tolerates_objects_without_hook(self):
        store = ViewModelStore()
        store.get("plain", object)
        store.clear()
        assert len(store) == 0

    def test_clear_empties_store_when_a_teardown_fails(self, qapp):
        class Broken:
            def on_cleared(self):
                raise RuntimeError("teardown failed")

        store = ViewModelStore()
        store.get("broken", Broken)
        healthy = store.get("healthy", VolumeViewModel)
        healthy.subscribe(lambda v: None)

        with pytest.raises(RuntimeError, match="teardown failed"):
            store.clear()

        assert len(store) == 0
        assert healthy.subscriber_count == 0

    def test_state_survives_between_lookups(self, qapp):
        store = ViewModelStore()
        store.get_view_model(VolumeViewModel).calculate_volume(2, 3, 4)
        assert store.get_view_model(VolumeViewModel).get_current() == "24"
