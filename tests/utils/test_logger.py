"""Tests for Logger."""

import logging
from mcp_starter.utils.logger import Logger


class TestLogger:
    """Test Logger."""
    
    def test_logger_levels(self):
        """Should support different log levels."""
        logger_debug = Logger("test-levels", level="DEBUG")
        assert logger_debug.logger.level == logging.DEBUG
        
        logger_debug.setLevel("ERROR")
        assert logger_debug.logger.level == logging.ERROR
    
    def test_unknown_level_falls_back_to_debug(self):
        assert Logger("test-unknown", level="LOUD").logger.level == logging.DEBUG
    
    def test_child_propagates_to_parent(self, caplog):
        """Child loggers share the parent's handler instead of adding their own."""
        parent = Logger("test-parent", level="INFO")
        child = parent.getChild("registry")
        
        assert child.name == "test-parent.registry"
        assert child.logger.handlers == []
        
        with caplog.at_level(logging.INFO, logger="test-parent"):
            child.info("Found 2 module files to register")
        
        assert "Found 2 module files to register" in caplog.text
    
    def test_logger_methods(self):
        """Should have logging methods."""
        logger = Logger("test-methods")
        
        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")
        logger.error("Error message")
