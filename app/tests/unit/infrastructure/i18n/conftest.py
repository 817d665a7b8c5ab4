"""Feature-level fixtures for i18n system tests.

Provides locale directories, stores, caches and services for translation
scenarios.
"""

import json

import pytest
import yaml

from infrastructure.i18n import (
    JSONTranslationLoader,
    Language,
    StableStringCache,
)
from tests.factories.i18n import make_localization_service, make_store


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create temporary directory with sample JSON locale files.

    Returns a directory structure like:
    - en.json
    - zh-CN.json
    - ja.json
    (zh-TW and ko are intentionally missing)
    """
    en = {
        "menu.file": "File",
        "custom_panel.title": "Custom Panel",
        "status.items_selected": "{0} of {1} items selected",
    }
    zh_cn = {
        "menu.file": "文件",
        "custom_panel.title": "自定义面板",
    }
    ja = {
        "menu.file": "ファイル",
    }
    for tag, messages in (("en", en), ("zh-CN", zh_cn), ("ja", ja)):
        with open(tmp_path / f"{tag}.json", "w", encoding="utf-8") as f:
            json.dump(messages, f, ensure_ascii=False)

    return tmp_path


@pytest.fixture
def temp_yaml_locales_dir(tmp_path):
    """Create temporary directory with YAML locale files.

    - en.yml
    - menu.en.yml (merged after en.yml)
    - ko.yml
    """
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"menu.file": "File", "menu.edit": "Edit"}, f)
    with open(tmp_path / "menu.en.yml", "w", encoding="utf-8") as f:
        yaml.dump({"menu.edit": "Edit…", "menu.help": "Help"}, f)
    with open(tmp_path / "ko.yml", "w", encoding="utf-8") as f:
        yaml.dump({"menu.file": "파일"}, f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def json_loader(temp_locales_dir):
    """Create JSONTranslationLoader for temporary locales directory."""
    return JSONTranslationLoader(temp_locales_dir)


@pytest.fixture
def store():
    """TranslationStore with the factory tables, English active."""
    return make_store(default_language=Language.ENGLISH)


@pytest.fixture
def cache(store):
    """StableStringCache bound to store."""
    return StableStringCache(store)


@pytest.fixture
def service():
    """LocalizationService with the factory tables, English active."""
    return make_localization_service(default_language=Language.ENGLISH)
