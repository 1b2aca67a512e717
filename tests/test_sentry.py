# tests/test_sentry.py
from core_contracts.sentry import init_sentry, sentry_capture


def test_init_without_dsn_is_a_noop(monkeypatch, mocker):
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    mock_init = mocker.patch("core_contracts.sentry.sentry_sdk.init")

    assert init_sentry() is False
    mock_init.assert_not_called()


def test_init_with_dsn_runs_once(monkeypatch, mocker):
    monkeypatch.setenv("SENTRY_DSN", "https://public@o0.ingest.sentry.io/0")
    monkeypatch.setenv("CORE_CONTRACTS_ENV", "staging")
    mock_init = mocker.patch("core_contracts.sentry.sentry_sdk.init")

    assert init_sentry(release="core-contracts@2.0.0") is True
    init_sentry(release="core-contracts@2.0.0")

    mock_init.assert_called_once()
    kwargs = mock_init.call_args.kwargs
    assert kwargs["dsn"] == "https://public@o0.ingest.sentry.io/0"
    assert kwargs["environment"] == "staging"


def test_capture_is_skipped_when_not_initialised(mocker):
    mocker.patch("core_contracts.sentry.sentry_sdk.is_initialized", return_value=False)
    mock_capture = mocker.patch("core_contracts.sentry.sentry_sdk.capture_exception")

    sentry_capture(RuntimeError("boom"))

    mock_capture.assert_not_called()


def test_capture_attaches_extras(mocker):
    mocker.patch("core_contracts.sentry.sentry_sdk.is_initialized", return_value=True)
    scope = mocker.MagicMock()
    new_scope = mocker.patch("core_contracts.sentry.sentry_sdk.new_scope")
    new_scope.return_value.__enter__.return_value = scope
    mock_capture = mocker.patch("core_contracts.sentry.sentry_sdk.capture_exception")
    exc = RuntimeError("boom")

    sentry_capture(exc, extras={"url": "http://core-data:59880"})

    scope.set_extra.assert_called_once_with("url", "http://core-data:59880")
    mock_capture.assert_called_once_with(exc)
