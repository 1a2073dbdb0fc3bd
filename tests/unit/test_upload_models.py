"""Tests for upload models."""
import dataclasses

import pytest
from pathlib import Path

from blobpy.core.upload.models import (
    UploadOptions,
    FileInput,
    AddedFile,
    UploadProgress
)


class TestUploadOptions:
    """Test suite for UploadOptions."""
    
    def test_all_unset_by_default(self):
        """Test every field defaults to None."""
        options = UploadOptions()
        
        assert all(getattr(options, f.name) is None for f in dataclasses.fields(options))
    
    def test_frozen(self):
        """Test options are immutable."""
        options = UploadOptions(pin=True)
        
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.pin = False
    
    @pytest.mark.parametrize('version', [0, 1])
    def test_valid_cid_versions(self, version):
        """Test CID versions 0 and 1 are accepted."""
        assert UploadOptions(cid_version=version).cid_version == version
    
    def test_invalid_cid_version(self):
        """Test other CID versions are rejected."""
        with pytest.raises(ValueError, match="cid_version"):
            UploadOptions(cid_version=2)


class TestFileInput:
    """Test suite for FileInput."""
    
    def test_bytes_input(self):
        """Test in-memory content."""
        file = FileInput(b"hello", last_modified=1500, path="dir/hello.txt")
        
        assert file.name == "dir/hello.txt"
        assert file.size == 5
        assert file.is_local is False
    
    def test_bytes_without_path(self):
        """Test default name for anonymous bytes."""
        assert FileInput(b"x").name == "blob"
    
    def test_string_path_becomes_path(self, temp_file):
        """Test string content is treated as a local path."""
        file = FileInput(str(temp_file))
        
        assert file.content == temp_file
        assert file.is_local is True
        assert file.name == temp_file.name
        assert file.size == 20
    
    def test_negative_timestamp_rejected(self):
        """Test negative modification times are rejected."""
        with pytest.raises(ValueError):
            FileInput(b"x", last_modified=-1)
    
    def test_from_path(self, temp_file):
        """Test building from a local file reads its mtime in ms."""
        file = FileInput.from_path(temp_file)
        
        assert file.content == temp_file
        assert file.last_modified == 1_701_532_800_123
        assert file.path is None
        assert file.name == temp_file.name
    
    def test_from_path_with_name(self, temp_file):
        """Test overriding the sent name."""
        file = FileInput.from_path(temp_file, name="renamed.txt")
        
        assert file.name == "renamed.txt"
    
    def test_from_path_missing(self):
        """Test missing files are rejected."""
        with pytest.raises(FileNotFoundError):
            FileInput.from_path(Path("/nonexistent/file.txt"))
    
    def test_from_path_directory(self, tmp_path):
        """Test directories are rejected."""
        with pytest.raises(ValueError):
            FileInput.from_path(tmp_path)


class TestAddedFile:
    """Test suite for AddedFile."""
    
    def test_equality(self):
        """Test value equality."""
        from multiformats import CID
        cid = CID.decode('QmUNLLsPACCz1vLxQVkXqqLX5R1X345qqfHbsf67hvA3Nn')
        
        assert AddedFile(cid, "a", 1) == AddedFile(cid, "a", 1)


class TestUploadProgress:
    """Test suite for UploadProgress."""
    
    def test_percentage(self):
        """Test percentage calculation."""
        assert UploadProgress(loaded=25, total=100).percentage == 25.0
    
    def test_percentage_unknown_total(self):
        """Test percentage with unknown or zero total."""
        assert UploadProgress(loaded=25).percentage == 0.0
        assert UploadProgress(loaded=0, total=0).percentage == 0.0
    
    def test_is_complete(self):
        """Test completion flag."""
        assert UploadProgress(loaded=10, total=10).is_complete is True
        assert UploadProgress(loaded=9, total=10).is_complete is False
        assert UploadProgress(loaded=9).is_complete is False
