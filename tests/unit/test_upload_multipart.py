"""Tests for multipart body construction."""
import pytest
import aiohttp

from blobpy.core.upload import FileInput, MultipartData, build_body, last_modified_headers
from blobpy.core.upload.multipart import _ProgressTracker


class TestLastModifiedHeaders:
    """Test suite for last_modified_headers."""
    
    def test_zero(self):
        """Test the epoch."""
        assert last_modified_headers(0) == {'mtime': '0', 'mtime-nsecs': '0'}
    
    def test_sub_second(self):
        """Test a timestamp with a millisecond remainder."""
        assert last_modified_headers(1500) == {'mtime': '1', 'mtime-nsecs': '500000'}
    
    @pytest.mark.parametrize('ms', [1, 999, 1000, 1001, 1_701_532_800_123, 2**53])
    def test_floor_division(self, ms):
        """Test seconds and remainder follow floor division exactly."""
        headers = last_modified_headers(ms)
        secs = ms // 1000
        
        assert headers['mtime'] == str(secs)
        assert headers['mtime-nsecs'] == str((ms - secs * 1000) * 1000)
    
    def test_negative_rejected(self):
        """Test negative timestamps are rejected."""
        with pytest.raises(ValueError):
            last_modified_headers(-1)


class TestBuildBody:
    """Test suite for build_body."""
    
    def test_entries_in_order(self):
        """Test every file is attached under 'file' in input order."""
        files = [
            FileInput(b"a", 1000, "a.txt"),
            FileInput(b"bb", 2500, "b.txt"),
            FileInput(b"ccc", 0, "c.txt"),
        ]
        body = build_body(files)
        
        assert len(body) == 3
        assert [entry[0] for entry in body.entries] == ['file', 'file', 'file']
        assert [entry[1] for entry in body.entries] == files
        assert body.entries[1][2] == {'mtime': '2', 'mtime-nsecs': '500000'}
    
    def test_total_size(self, temp_file):
        """Test total size covers bytes and local files."""
        body = build_body([FileInput(b"12345"), FileInput(temp_file)])
        
        assert body.total_size == 25
    
    def test_empty(self):
        """Test empty file list."""
        body = build_body([])
        
        assert len(body) == 0
        assert body.total_size == 0


class TestMultipartData:
    """Test suite for MultipartData."""
    
    def test_to_writer_parts(self):
        """Test writer parts carry disposition and mtime headers."""
        body = build_body([FileInput(b"hello", 1500, "hello.txt")])
        writer = body.to_writer()
        
        assert isinstance(writer, aiohttp.MultipartWriter)
        parts = list(writer)
        assert len(parts) == 1
        payload = parts[0][0]
        assert payload.headers['mtime'] == '1'
        assert payload.headers['mtime-nsecs'] == '500000'
        disposition = payload.headers['Content-Disposition']
        assert 'name="file"' in disposition
        assert 'filename="hello.txt"' in disposition
    
    @pytest.mark.asyncio
    async def test_stream_bytes_in_chunks(self):
        """Test in-memory content is split by chunk size."""
        body = MultipartData(chunk_size=4)
        file = FileInput(b"0123456789")
        
        chunks = [chunk async for chunk in body._stream(file, None)]
        
        assert chunks == [b"0123", b"4567", b"89"]
    
    @pytest.mark.asyncio
    async def test_stream_local_file(self, temp_file):
        """Test local content is read from disk."""
        body = MultipartData(chunk_size=8)
        
        chunks = [chunk async for chunk in body._stream(FileInput(temp_file), None)]
        
        assert b"".join(chunks) == b"0123456789ABCDEFGHIJ"
        assert len(chunks) == 3
    
    @pytest.mark.asyncio
    async def test_stream_reports_progress(self):
        """Test progress grows monotonically up to the total."""
        events = []
        body = MultipartData(chunk_size=3)
        tracker = _ProgressTracker(10, events.append)
        
        async for _ in body._stream(FileInput(b"0123456789"), tracker):
            pass
        
        assert [e.loaded for e in events] == [3, 6, 9, 10]
        assert all(e.total == 10 for e in events)
        assert events[-1].is_complete
