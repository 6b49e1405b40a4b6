from common.i18n import get_i18n_values


def test_get_i18n_values_empty():
    assert get_i18n_values({}) == {}


def test_get_i18n_values_spreads_over_installed_languages():
    assert get_i18n_values({"en": "Recent activity", "de": "Letzte Aktivitäten"}) == {
        "en": "Recent activity",
        "de": "Letzte Aktivitäten",
        "": "Recent activity",
    }


def test_get_i18n_values_skip_default():
    assert get_i18n_values({"en": "Hello", "de": "Hallo"}, skip_default=True) == {
        "en": "Hello",
        "de": "Hallo",
    }


def test_get_i18n_values_falls_back_to_default_language():
    assert get_i18n_values({"en": "Hello"}, skip_default=True) == {
        "en": "Hello",
        "de": "Hello",
    }


def test_get_i18n_values_falls_back_to_first_value():
    assert get_i18n_values({"fr": "Salut", "de": "Hallo"}, skip_default=True) == {
        "en": "Salut",
        "de": "Hallo",
    }


def test_get_i18n_values_neutral_value_stands_in_for_default_language():
    assert get_i18n_values({"": "Hi", "de": "Hallo"}) == {
        "en": "Hi",
        "de": "Hallo",
        "": "Hi",
    }


def test_get_i18n_values_follows_settings(settings):
    settings.LANGUAGES = [("en", "English"), ("fr", "French")]

    assert get_i18n_values({"en": "Hello"}, skip_default=True) == {
        "en": "Hello",
        "fr": "Hello",
    }
