from unittest.mock import MagicMock, patch

import pymysql
import pytest

from dbproject.__main__ import main


@patch("dbproject.__main__.describe_connection")
@patch("dbproject.__main__.connect_or_exit")
def test_main_reports_and_closes(mock_connect, mock_describe, capsys):
    conn = MagicMock()
    mock_connect.return_value = conn
    mock_describe.return_value = {"database": "dbproject", "host": "localhost", "charset": "utf8mb4"}

    assert main() == 0

    assert "[DB] connected to dbproject@localhost (charset=utf8mb4)" in capsys.readouterr().out
    conn.close.assert_called_once()


@patch("pymysql.connect")
def test_main_unreachable_host_exits_nonzero(mock_connect, capsys):
    mock_connect.side_effect = pymysql.err.OperationalError(2003, "Can't connect to MySQL server on 'nohost'")

    with pytest.raises(SystemExit) as exc:
        main()

    assert exc.value.code != 0
    assert "failed" in capsys.readouterr().err
