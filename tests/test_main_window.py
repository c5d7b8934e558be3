"""Tests for the countries form: population, selection and button wiring."""

from __future__ import annotations

import logging

import pytest
from PySide6.QtCore import Qt

from countries_forms import main_window as main_window_module
from countries_forms.core.countries import Country, CountryRecord, Records, References


@pytest.fixture
def shown_keys(monkeypatch):
    """Capture information dialog calls instead of running them modally."""
    calls: list[tuple[object, str]] = []

    def fake_information(owner, heading, button_text="Ok"):
        calls.append((owner, heading))
        return 0

    monkeypatch.setattr(main_window_module.info_dialog, "information", fake_information)
    return calls


def test_lists_empty_until_shown(main_window):
    assert main_window.country_records_source.rowCount() == 0
    assert main_window.country_class_source.rowCount() == 0


def test_populated_on_show(shown_window):
    expected = len(Records.countries())

    assert shown_window.country_records_source.rowCount() == expected
    assert shown_window.country_class_source.rowCount() == expected
    assert shown_window.country_record_list.model() is shown_window.country_records_source
    assert shown_window.country_class_list.model() is shown_window.country_class_source
    assert shown_window.country_records_source.display_member == "name"


def test_item_types(shown_window):
    assert isinstance(shown_window.selected_country_record(), CountryRecord)
    assert isinstance(shown_window.selected_country_class(), Country)


def test_first_row_selected_after_show(shown_window):
    assert shown_window.country_record_list.currentIndex().row() == 0
    assert shown_window.country_class_list.currentIndex().row() == 0


def test_status_reports_range(shown_window):
    records = Records.countries()
    message = shown_window.statusBar().currentMessage()
    assert message.startswith(f"Loaded {len(records)} countries")
    assert records[-1].name in message


def test_populates_only_once(main_window, monkeypatch):
    calls = []
    original = main_window.populate

    def counting_populate():
        calls.append(1)
        original()

    monkeypatch.setattr(main_window, "populate", counting_populate)
    main_window.show()
    main_window.hide()
    main_window.show()
    assert len(calls) == 1


def test_record_button_shows_key(qtbot, shown_window, shown_keys):
    row = 5
    view = shown_window.country_record_list
    view.setCurrentIndex(shown_window.country_records_source.index(row, 0))
    expected = Records.countries()[row]

    qtbot.mouseClick(shown_window.current_country_record_button, Qt.MouseButton.LeftButton)

    assert shown_keys == [(shown_window.current_country_record_button, f"Key: {expected.id}")]


def test_class_button_shows_key(qtbot, shown_window, shown_keys):
    row = 10
    view = shown_window.country_class_list
    view.setCurrentIndex(shown_window.country_class_source.index(row, 0))
    expected = References.countries()[row]

    qtbot.mouseClick(shown_window.country_class_button, Qt.MouseButton.LeftButton)

    assert shown_keys == [(shown_window.country_class_button, f"Key: {expected.id}")]


def test_lists_select_independently(qtbot, shown_window, shown_keys):
    shown_window.country_record_list.setCurrentIndex(
        shown_window.country_records_source.index(1, 0)
    )
    shown_window.country_class_list.setCurrentIndex(
        shown_window.country_class_source.index(2, 0)
    )
    countries = Records.countries()

    shown_window.on_country_record_clicked()
    shown_window.on_country_class_clicked()

    assert [heading for _, heading in shown_keys] == [
        f"Key: {countries[1].id}",
        f"Key: {countries[2].id}",
    ]


def test_double_click_matches_button(shown_window, shown_keys):
    index = shown_window.country_class_source.index(3, 0)
    shown_window.country_class_list.setCurrentIndex(index)
    shown_window.country_class_list.doubleClicked.emit(index)
    assert shown_keys == [
        (shown_window.country_class_button, f"Key: {References.countries()[3].id}")
    ]


def test_empty_provider_guarded(qtbot, main_window, shown_keys, monkeypatch, caplog):
    monkeypatch.setattr(Records, "countries", staticmethod(lambda: []))
    monkeypatch.setattr(References, "countries", staticmethod(lambda: []))
    main_window.show()

    with caplog.at_level(logging.WARNING, logger="countries_forms"):
        qtbot.mouseClick(main_window.current_country_record_button, Qt.MouseButton.LeftButton)
        qtbot.mouseClick(main_window.country_class_button, Qt.MouseButton.LeftButton)

    assert shown_keys == []
    assert main_window.statusBar().currentMessage() == "Select a country first."
    assert "no country selected" in caplog.text


def test_close_saves_geometry(main_window, settings):
    main_window.show()
    main_window.close()
    assert settings.get_window_geometry()


def test_theme_change_applies_stylesheet(qapp, main_window):
    main_window._on_theme_changed("dark")
    assert "background-color" in qapp.styleSheet()
    assert main_window.statusBar().currentMessage() == "Theme changed to dark"
    qapp.setStyleSheet("")


def test_status_names_first_and_last_country(shown_window):
    assert shown_window.statusBar().currentMessage().endswith("(Afghanistan to Zimbabwe)")


def test_click_logs_selection_presence(qtbot, shown_window, shown_keys, caplog):
    with caplog.at_level(logging.DEBUG, logger="countries_forms"):
        qtbot.mouseClick(shown_window.country_class_button, Qt.MouseButton.LeftButton)
    assert "countryClassButton clicked, selection present: Yes" in caplog.text


def test_empty_click_logs_no_selection(qtbot, main_window, shown_keys, monkeypatch, caplog):
    monkeypatch.setattr(Records, "countries", staticmethod(lambda: []))
    monkeypatch.setattr(References, "countries", staticmethod(lambda: []))
    main_window.show()
    with caplog.at_level(logging.DEBUG, logger="countries_forms"):
        qtbot.mouseClick(main_window.current_country_record_button, Qt.MouseButton.LeftButton)
    assert "currentCountryRecordButton clicked, selection present: No" in caplog.text
