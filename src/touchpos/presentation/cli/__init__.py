from .main import create_parser, run_cli, run_session, read_event_script

__all__ = ["create_parser", "run_cli", "run_session", "read_event_script"]
