"""Tests for source load logging."""

from unittest.mock import Mock

from streacs_app.data.loader import DataLoader
from streacs_app.logging.config import configure_logging, log_source_load


class TestSourceLoadLogging:
    """Test logging of source load outcomes."""

    def setup_method(self):
        """Set up test environment with logging capture."""
        configure_logging(level="DEBUG", format_json=True)

        self.log_messages = []
        self.mock_logger = Mock()

        def capture(level):
            def _capture(message, **kwargs):
                self.log_messages.append({
                    'message': message,
                    'level': level,
                    'kwargs': kwargs
                })
            return _capture

        # bind() returns a logger carrying the bound fields
        def bind(**kwargs):
            bound = Mock()
            bound.bind = lambda **more: bind(**{**kwargs, **more})
            bound.info = lambda message: capture('info')(message, **kwargs)
            bound.warning = lambda message: capture('warning')(message, **kwargs)
            return bound

        self.mock_logger.bind = bind

    def test_loaded_source_logs_info(self):
        log_source_load(self.mock_logger, "vre", "loaded", 12)

        assert len(self.log_messages) == 1
        assert self.log_messages[0]['level'] == 'info'
        assert self.log_messages[0]['kwargs'] == {
            'source': 'vre', 'origin': 'loaded', 'entries': 12,
        }

    def test_fallback_logs_warning_with_context(self):
        log_source_load(self.mock_logger, "ipp", "fallback", 3,
                        {"error": "HTTP 404", "location": "data/ipp-entry.json"})

        assert len(self.log_messages) == 1
        entry = self.log_messages[0]
        assert entry['level'] == 'warning'
        assert entry['kwargs']['origin'] == 'fallback'
        assert entry['kwargs']['error'] == 'HTTP 404'
        assert entry['kwargs']['location'] == 'data/ipp-entry.json'

    def test_loader_logs_every_source(self, source_config, full_fetcher, monkeypatch):
        """Every named source reports exactly one outcome."""
        import streacs_app.data.loader as loader_module
        monkeypatch.setattr(loader_module, "logger", self.mock_logger)

        DataLoader(source_config, fetcher=full_fetcher).load_all()

        by_source = {m['kwargs']['source']: m for m in self.log_messages}
        assert set(by_source) == {"market_structure", "regulators", "ipp", "vre", "world_map"}
        assert by_source["market_structure"]['level'] == 'info'
        assert by_source["regulators"]['kwargs']['origin'] == 'fallback'
        assert by_source["ipp"]['level'] == 'warning'
