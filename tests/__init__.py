"""
Test package.

Do not globally monkeypatch sys.modules here; prefer per-test fixtures.
"""
