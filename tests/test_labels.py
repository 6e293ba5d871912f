"""
Tests for the label accessors
"""

import errno
import os
from pathlib import Path

import pytest
from pysmack.config import get_smack_config
from pysmack.exceptions import LabelRangeError, SmackIOError
from pysmack.labels import get_label, set_label, get_label_of_process


class FakeXattrs:
    """In-memory stand-in for the os extended attribute calls"""
    
    def __init__(self):
        self.values = {}
        self.calls = []
    
    def getxattr(self, path, attribute, *, follow_symlinks=True):
        self.calls.append(("get", path, attribute, follow_symlinks))
        try:
            return self.values[(path, attribute)]
        except KeyError:
            raise OSError(errno.ENODATA, os.strerror(errno.ENODATA), path)
    
    def setxattr(self, path, attribute, value, flags=0, *, follow_symlinks=True):
        self.calls.append(("set", path, attribute, follow_symlinks))
        self.values[(path, attribute)] = value


class TestFileLabels:
    """Test reading and writing labels on paths"""
    
    @pytest.fixture(autouse=True)
    def patch_os(self, monkeypatch: pytest.MonkeyPatch):
        self.xattrs = FakeXattrs()
        monkeypatch.setattr(os, "getxattr", self.xattrs.getxattr, raising=False)
        monkeypatch.setattr(os, "setxattr", self.xattrs.setxattr, raising=False)
    
    def test_set_then_get(self, tmp_path: Path):
        path = tmp_path / "file"
        
        set_label(path, "Secret")
        
        assert get_label(path) == "Secret"
        assert self.xattrs.values[(str(path), "security.SMACK64")] == b"Secret"
    
    def test_symlink_flag_passed_through(self, tmp_path: Path):
        path = str(tmp_path / "link")
        
        set_label(path, "Secret", follow_symlinks=False)
        get_label(path, follow_symlinks=False)
        
        assert [call[3] for call in self.xattrs.calls] == [False, False]
    
    def test_missing_attribute(self, tmp_path: Path):
        with pytest.raises(SmackIOError) as exc_info:
            get_label(tmp_path / "file")
        
        assert exc_info.value.errno == errno.ENODATA
    
    def test_long_label_rejected_before_write(self, tmp_path: Path):
        with pytest.raises(LabelRangeError):
            set_label(tmp_path / "file", "L" * 24)
        
        assert self.xattrs.calls == []
    
    def test_write_failure(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        def failing_setxattr(path, attribute, value, flags=0, *, follow_symlinks=True):
            raise OSError(errno.EPERM, os.strerror(errno.EPERM), path)
        
        monkeypatch.setattr(os, "setxattr", failing_setxattr)
        
        with pytest.raises(SmackIOError) as exc_info:
            set_label(tmp_path / "file", "Secret")
        
        assert exc_info.value.errno == errno.EPERM
    
    def test_undecodable_attribute(self, tmp_path: Path):
        path = str(tmp_path / "file")
        self.xattrs.values[(path, "security.SMACK64")] = b"\xffbad"
        
        with pytest.raises(SmackIOError) as exc_info:
            get_label(path)
        
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
    
    def test_configured_attribute_name(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(get_smack_config(), "xattr_name", "security.SMACK64EXEC")
        
        set_label(tmp_path / "file", "Exec")
        
        assert (str(tmp_path / "file"), "security.SMACK64EXEC") in self.xattrs.values


class TestProcessLabels:
    """Test reading process labels"""
    
    @pytest.fixture(autouse=True)
    def proc_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(
            get_smack_config(), "proc_attr_path", str(tmp_path / "{pid}" / "current")
        )
        self.root = tmp_path
    
    def write_current(self, pid: int, text: str) -> None:
        directory = self.root / str(pid)
        directory.mkdir()
        (directory / "current").write_text(text, encoding="utf-8")
    
    def test_reads_first_line(self):
        self.write_current(42, "System\nignored\n")
        assert get_label_of_process(42) == "System"
    
    def test_strips_trailing_nul(self):
        self.write_current(43, "User\x00")
        assert get_label_of_process(43) == "User"
    
    def test_missing_process(self):
        with pytest.raises(SmackIOError):
            get_label_of_process(99999)
    
    def test_empty_file(self):
        self.write_current(44, "")
        with pytest.raises(SmackIOError):
            get_label_of_process(44)
    
    def test_undecodable_label(self):
        directory = self.root / "45"
        directory.mkdir()
        (directory / "current").write_bytes(b"\xff\n")
        
        with pytest.raises(SmackIOError) as exc_info:
            get_label_of_process(45)
        
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
