from unittest.mock import patch

from wordboard.server import __main__ as entrypoint


def test_main_runs_uvicorn_with_settings():
    with patch.object(entrypoint, "uvicorn") as mock_uvicorn, patch.object(entrypoint, "settings") as mock_settings:
        mock_settings.server_host = "127.0.0.1"
        mock_settings.server_port = 9090

        entrypoint.main()

    mock_uvicorn.run.assert_called_once_with(
        "wordboard.server.main:app", host="127.0.0.1", port=9090, log_config=None
    )
