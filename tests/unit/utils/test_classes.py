"""Tests for class and module name helpers."""

from toolbag.utils import classes


class TestGetClass:
    """Tests for get_class."""

    def test_posix_path(self):
        assert classes.get_class("/srv/app/src/toolbag/meta/store.py") == "toolbag.meta.store"

    def test_windows_path(self):
        """Backslashes and an uppercase suffix are handled."""
        assert classes.get_class("C:\\code\\toolbag\\utils\\text.PY") == "toolbag.utils.text"

    def test_custom_root(self):
        assert classes.get_class("/opt/site/app/models/user.py", root="app") == "app.models.user"

    def test_root_missing(self):
        """Without the root the whole path is converted."""
        assert classes.get_class("scripts/run.py") == "scripts.run"


class TestNames:
    """Tests for get_class_name and get_class_root."""

    def test_get_class_name(self):
        assert classes.get_class_name("toolbag.meta.store.MetadataStore") == "MetadataStore"
        assert classes.get_class_name("MetadataStore") == "MetadataStore"

    def test_get_class_root(self):
        assert classes.get_class_root("toolbag.meta.store.MetadataStore") == "toolbag.meta.store"
        assert classes.get_class_root("MetadataStore") == ""
