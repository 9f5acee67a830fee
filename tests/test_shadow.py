import errno
import os
import tempfile
from unittest import mock

import pytest
from unpath.cli.exceptions import UserException
from unpath.osutils import probe_dir
from unpath.shadow import ShadowError, shadow_dir


class TestShadowDir:

    @pytest.fixture(autouse=True)
    def _setup(self, tmp_path, monkeypatch):
        self.tmpdir = tmp_path / 'tmp'
        self.tmpdir.mkdir()
        monkeypatch.setattr(tempfile, 'tempdir', str(self.tmpdir))

        self.bindir = tmp_path / 'bin'
        self.bindir.mkdir()
        for name in ('cat', 'echo'):
            fp = self.bindir / name
            fp.write_text(f'#!/bin/sh\n# {name}\n')
            fp.chmod(0o755)
        (self.bindir / 'subdir').mkdir()

    def test_excludes_entry(self):
        entries, i = probe_dir(str(self.bindir), 'cat')
        shadow = shadow_dir(str(self.bindir), entries, i)
        assert sorted(os.listdir(shadow)) == ['echo', 'subdir']

    def test_symlinks_to_source(self):
        entries, i = probe_dir(str(self.bindir), 'cat')
        shadow = shadow_dir(str(self.bindir), entries, i)
        for name in ('echo', 'subdir'):
            link = os.path.join(shadow, name)
            assert os.path.islink(link)
            assert os.readlink(link) == str(self.bindir / name)
        echo = os.path.join(shadow, 'echo')
        assert os.access(echo, os.X_OK)
        with open(echo) as f:
            assert f.read() == '#!/bin/sh\n# echo\n'
        assert os.path.isdir(os.path.join(shadow, 'subdir'))

    def test_fresh_tempdir(self):
        entries, i = probe_dir(str(self.bindir), 'cat')
        shadow1 = shadow_dir(str(self.bindir), entries, i)
        shadow2 = shadow_dir(str(self.bindir), entries, i)
        assert shadow1 != shadow2
        assert os.path.dirname(shadow1) == str(self.tmpdir)
        assert os.path.basename(shadow1).startswith('bin')
        # source directory is left alone
        assert sorted(os.listdir(self.bindir)) == ['cat', 'echo', 'subdir']

    def test_relative_source(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        entries, i = probe_dir('bin', 'cat')
        shadow = shadow_dir('bin', entries, i)
        target = os.readlink(os.path.join(shadow, 'echo'))
        assert os.path.isabs(target)
        assert os.path.samefile(target, self.bindir / 'echo')

    def test_trailing_slash(self):
        entries, i = probe_dir(str(self.bindir) + os.sep, 'cat')
        shadow = shadow_dir(str(self.bindir) + os.sep, entries, i)
        assert os.path.basename(shadow).startswith('bin')
        assert os.readlink(os.path.join(shadow, 'echo')) == str(self.bindir / 'echo')

    def test_tempdir_failure(self):
        error = OSError(errno.ENOSPC, os.strerror(errno.ENOSPC))
        with mock.patch.object(tempfile, 'mkdtemp', side_effect=error), \
                pytest.raises(ShadowError) as excinfo:
            shadow_dir(str(self.bindir), ['cat', 'echo'], 0)
        assert excinfo.value.path == str(self.bindir)
        assert isinstance(excinfo.value.error, OSError)
        assert str(self.bindir) in str(excinfo.value)

    def test_symlink_failure(self):
        # duplicate names collide inside the shadow dir
        with pytest.raises(ShadowError) as excinfo:
            shadow_dir(str(self.bindir), ['cat', 'echo', 'echo'], 0)
        assert isinstance(excinfo.value.__cause__, FileExistsError)

    def test_user_exception(self):
        assert issubclass(ShadowError, UserException)

    def test_verbose_msg(self):
        with mock.patch.object(tempfile, 'mkdtemp', side_effect=PermissionError(errno.EACCES, 'denied')), \
                pytest.raises(ShadowError) as excinfo:
            shadow_dir(str(self.bindir), ['cat', 'echo'], 0)
        assert excinfo.value.entry is None
        assert 'temporary directory' in excinfo.value.msg(1)

        with pytest.raises(ShadowError) as excinfo:
            shadow_dir(str(self.bindir), ['cat', 'echo', 'echo'], 0)
        assert excinfo.value.entry == 'echo'
        assert excinfo.value.msg(1) == f"unable to link entry 'echo' of {str(self.bindir)!r}"
