import pytest


def test_settings_from_form_converts_widget_values():
    from picdiskslimmer.gui.form import settings_from_form
    from picdiskslimmer.storage import Settings

    settings = settings_from_form(42.6, 1, "16")
    assert settings == Settings(quality=43, delete_source_after_processing=True, parallel_worker_count=16)


@pytest.mark.parametrize(
    "quality, expected",
    [(0, 1), (-20, 1), (100, 100), (150.0, 100), ("85", 85), ("bad", 70)],
)
def test_settings_from_form_clamps_quality(quality, expected):
    from picdiskslimmer.gui.form import settings_from_form

    assert settings_from_form(quality, False, "8").quality == expected


@pytest.mark.parametrize("workers, expected", [("0", 1), ("-3", 1), (" 4 ", 4), ("many", 8), (None, 8)])
def test_settings_from_form_worker_count(workers, expected):
    from picdiskslimmer.gui.form import settings_from_form

    assert settings_from_form(70, False, workers).parallel_worker_count == expected


def test_worker_choices_include_current_value():
    from picdiskslimmer.gui.form import worker_choices

    assert worker_choices(8) == ["1", "2", "4", "8", "16", "32"]
    assert worker_choices(6) == ["1", "2", "4", "6", "8", "16", "32"]
    assert worker_choices(0) == ["1", "2", "4", "8", "16", "32"]
