"""Tests for the root search strategy."""

from __future__ import annotations

import os
from pathlib import Path

from winbundle.l1_entities.config import SearchRoot
from winbundle.l2_use_cases.search_strategy import SearchStrategy, candidates


class TestExplicitRoot:
    def test_probe_order(self):
        result = [str(p) for p in candidates('foo.lib', SearchRoot(sysroot='/opt/x'))]
        assert result == ['/opt/x/foo.lib', '/opt/x/bin/foo.lib', '/opt/x/lib/foo.lib']

    def test_environment_ignored_when_root_set(self):
        result = list(candidates('foo.dll', SearchRoot(sysroot='/opt/x'), environ={'PATH': '/usr/bin'}))
        assert all(str(p).startswith('/opt/x') for p in result)

    def test_does_not_touch_filesystem(self, tmp_path: Path):
        root = tmp_path / 'does-not-exist'
        result = list(candidates('foo.dll', SearchRoot(sysroot=str(root))))
        assert len(result) == 3
        assert not root.exists()


class TestEnvironmentSearchPath:
    def test_follows_declared_order(self):
        env = {'PATH': os.pathsep.join(['/b', '/a', '/c'])}
        result = list(candidates('foo.dll', SearchRoot(), environ=env))
        assert result == [Path('/b/foo.dll'), Path('/a/foo.dll'), Path('/c/foo.dll')]

    def test_empty_entries_skipped(self):
        env = {'PATH': os.pathsep.join(['/a', '', '/b'])}
        result = list(candidates('foo.dll', SearchRoot(), environ=env))
        assert result == [Path('/a/foo.dll'), Path('/b/foo.dll')]

    def test_custom_variable(self):
        env = {'PATH': '/ignored', 'DLLPATH': '/dlls'}
        result = list(candidates('foo.dll', SearchRoot(path_variable='DLLPATH'), environ=env))
        assert result == [Path('/dlls/foo.dll')]

    def test_unset_variable_falls_back_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = list(candidates('foo.dll', SearchRoot(), environ={}))
        assert result == [Path.cwd() / 'foo.dll']

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv('PATH', '/from/env')
        assert list(candidates('foo.dll', SearchRoot())) == [Path('/from/env/foo.dll')]


class TestSearchStrategy:
    def test_restartable(self):
        strategy = SearchStrategy(SearchRoot(sysroot='/opt/x'))
        assert list(strategy.candidates('a.dll')) == list(strategy.candidates('a.dll'))

    def test_exposes_root(self):
        root = SearchRoot(sysroot='/opt/x')
        assert SearchStrategy(root).root is root
