"""Tests for the command-line interface."""
from typer.testing import CliRunner

from blobpy.cli.main import app


runner = CliRunner()


class TestPutCommand:
    """Test suite for the put command."""
    
    def test_help(self):
        """Test help lists the options."""
        result = runner.invoke(app, ["put", "--help"])
        
        assert result.exit_code == 0
        assert "--cid-version" in result.output
        assert "--wrap" in result.output
    
    def test_missing_file(self):
        """Test a missing file is a usage error."""
        result = runner.invoke(app, ["put", "/nonexistent/file.txt"])
        
        assert result.exit_code == 2
    
    def test_invalid_cid_version(self, temp_file):
        """Test CID versions outside 0-1 are rejected."""
        result = runner.invoke(app, ["put", str(temp_file), "--cid-version", "3"])
        
        assert result.exit_code == 2
    
    def test_unreachable_service(self, temp_file):
        """Test connection failures exit with status 1."""
        result = runner.invoke(
            app, ["put", str(temp_file), "--endpoint", "http://127.0.0.1:9/api/v0/"]
        )
        
        assert result.exit_code == 1
        assert "Add failed" in result.output
