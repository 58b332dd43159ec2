"""Tests for namespace and container configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from hyphae.config import ComponentDirConfig, ContainerConfig, Namespace, Namespaces
from hyphae.errors import NamespaceAlreadyAddedError
from hyphae.inflector import Inflector


class TestNamespaces:
    def test_add_defaults_key_and_const_to_path(self):
        namespaces = Namespaces()
        ns = namespaces.add("admin/reports")
        assert ns.key == "admin/reports"
        assert ns.const == "admin/reports"
        assert ns.default_key is True

    def test_add_with_explicit_key(self):
        ns = Namespaces().add("admin", key="backoffice")
        assert ns.key == "backoffice"
        assert ns.default_key is False

    def test_add_with_explicit_none_key(self):
        ns = Namespaces().add("admin", key=None, const=None)
        assert ns.key is None
        assert ns.const is None
        assert ns.default_key is False

    def test_implicit_root_appended(self):
        namespaces = Namespaces()
        namespaces.add("admin")
        result = namespaces.to_list()
        assert [ns.path for ns in result] == ["admin", None]
        assert result[-1] == Namespace.root()

    def test_explicit_root_keeps_declared_position(self):
        namespaces = Namespaces()
        namespaces.add_root(key="app")
        namespaces.add("admin")
        result = namespaces.to_list()
        assert [ns.path for ns in result] == [None, "admin"]
        assert result[0].key == "app"

    def test_duplicate_path_rejected(self):
        namespaces = Namespaces()
        namespaces.add("admin")
        with pytest.raises(NamespaceAlreadyAddedError):
            namespaces.add("admin", key="other")

    def test_second_root_rejected(self):
        namespaces = Namespaces()
        namespaces.add_root()
        with pytest.raises(NamespaceAlreadyAddedError):
            namespaces.add_root(key="x")

    def test_delete(self):
        namespaces = Namespaces()
        namespaces.add("admin")
        namespaces.add_root()
        assert namespaces.delete("admin").path == "admin"
        assert namespaces.delete_root().is_root
        assert len(namespaces) == 0
        assert namespaces.paths == []

    def test_paths_excludes_root(self):
        namespaces = Namespaces()
        namespaces.add_root()
        namespaces.add("admin")
        namespaces.add("mailers")
        assert namespaces.paths == ["admin", "mailers"]


class TestNamespace:
    def test_root_flags(self):
        assert Namespace.root().is_root
        assert not Namespace.root().has_path
        assert Namespace(path="admin").has_path

    def test_with_key_marks_key_explicit(self):
        ns = Namespace(path="a/b", key="a/b", const="a/b", default_key=True)
        rewritten = ns.with_key("a.b")
        assert rewritten.key == "a.b"
        assert rewritten.default_key is False
        assert rewritten.const == "a/b"


class TestContainerConfig:
    def test_defaults(self):
        config = ContainerConfig(root="/srv/app")
        assert config.root == Path("/srv/app")
        assert config.namespace_separator == "."
        assert isinstance(config.inflector, Inflector)
        assert config.component_dirs == []

    def test_add_component_dir(self):
        config = ContainerConfig(root="/srv/app")
        dir_config = config.add_component_dir("lib", auto_register=False)
        assert config.component_dirs == [dir_config]
        assert dir_config.component_options() == {
            "auto_register": False,
            "loader": None,
            "memoize": False,
        }

    def test_component_dir_has_own_namespaces(self):
        a = ComponentDirConfig(path="a")
        b = ComponentDirConfig(path="b")
        a.namespaces.add("x")
        assert len(b.namespaces) == 0
