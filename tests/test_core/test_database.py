from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from waterwise.core.database import init_db
from waterwise.core.exceptions import DatabaseException


def refused():
    return OperationalError("connect", {}, Exception("Connection refused"))


@patch("waterwise.core.database.time.sleep")
@patch("waterwise.core.database.Base.metadata.create_all")
def test_init_db_retries_until_database_is_up(mock_create_all, mock_sleep):
    mock_create_all.side_effect = [refused(), None]

    init_db(max_retries=3, retry_interval=0)

    assert mock_create_all.call_count == 2
    mock_sleep.assert_called_once_with(0)


@patch("waterwise.core.database.time.sleep")
@patch("waterwise.core.database.Base.metadata.create_all")
def test_init_db_gives_up(mock_create_all, mock_sleep):
    mock_create_all.side_effect = refused()

    with pytest.raises(DatabaseException):
        init_db(max_retries=2, retry_interval=0)
    assert mock_create_all.call_count == 2


@patch("waterwise.core.database.Base.metadata.create_all")
def test_init_db_reraises_other_errors(mock_create_all):
    mock_create_all.side_effect = OperationalError("stmt", {}, Exception("disk I/O error"))

    with pytest.raises(OperationalError):
        init_db(max_retries=5, retry_interval=0)
    assert mock_create_all.call_count == 1
