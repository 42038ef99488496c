"""Feature-level fixtures for i18n system tests.

Provides on-disk locale trees in both supported layouts.
"""

import json

import pytest
import yaml

from localekit.i18n import Translator
from tests.factories.i18n import make_general_tree


def _write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def locales_dir(tmp_path):
    """Create a locales directory laid out as <locale>/<namespace>.json.

    Returns a directory structure like:
    - en/general.json
    - en/common.json
    - ar/general.json
    - ar/common.yml
    """
    root = tmp_path / "locales"
    _write_json(root / "en" / "general.json", make_general_tree("en"))
    _write_json(root / "en" / "common.json", {"Success": "Success"})
    _write_json(root / "ar" / "general.json", make_general_tree("ar"))

    (root / "ar").mkdir(parents=True, exist_ok=True)
    with open(root / "ar" / "common.yml", "w", encoding="utf-8") as f:
        yaml.dump({"Success": "نجاح"}, f, allow_unicode=True)

    return root


@pytest.fixture
def features_dir(tmp_path):
    """Create a features directory laid out as <feature>/locales/<locale>.json.

    Returns a directory structure like:
    - foo/locales/en.json
    - foo/locales/ar.json
    - bar/locales/en.json
    - general/locales/en.json   (shadowed by the locales directory)
    """
    root = tmp_path / "features"
    _write_json(root / "foo" / "locales" / "en.json", {"Hello_World": "Hello World"})
    _write_json(root / "foo" / "locales" / "ar.json", {"Hello_World": "مرحبًا بالعالم"})
    _write_json(
        root / "bar" / "locales" / "en.json",
        {"Hello_World": "Hello World", "Goodbye": "Goodbye from bar"},
    )
    _write_json(
        root / "general" / "locales" / "en.json",
        {"Hello_World": "Hello from the general feature"},
    )
    return root


@pytest.fixture
def translator(locales_dir):
    """Create an en/ar Translator backed by the locales directory."""
    return Translator(
        locales_dir=locales_dir,
        current_locale="en",
        supported_locales=["en", "ar"],
    )
