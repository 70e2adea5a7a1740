from datetime import time, timedelta

import pytest

from src.attendance_payroll.attendance_payroll.database.bootstrap import _strip_create_db_and_use, iter_sql_statements
from src.attendance_payroll.attendance_payroll.database.connection import DBConfig
from src.attendance_payroll.attendance_payroll.database.mysql_base import normalize_mysql_time


def test_iter_sql_statements_splits_outside_quotes():
    sql = """
-- shifts
INSERT INTO shifts(shift_id, shift_name) VALUES ('GS', 'General; day');
INSERT INTO holidays(name) VALUES ("New Year");
SELECT 1
"""

    statements = list(iter_sql_statements(sql))

    assert statements == [
        "INSERT INTO shifts(shift_id, shift_name) VALUES ('GS', 'General; day')",
        'INSERT INTO holidays(name) VALUES ("New Year")',
        "SELECT 1",
    ]


def test_strip_create_db_and_use():
    sql = "CREATE DATABASE attendance;\nUSE attendance;\nCREATE TABLE t (id INT);\n"

    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]


@pytest.mark.parametrize(
    "value, expected",
    [
        (timedelta(hours=22), time(22, 0)),
        (timedelta(hours=7, minutes=30), time(7, 30)),
        ("09:00:00", time(9, 0)),
        (time(18, 0), time(18, 0)),
        (None, None),
    ],
)
def test_normalize_mysql_time(value, expected):
    assert normalize_mysql_time(value) == expected


def test_db_config_defaults():
    config = DBConfig.from_mapping({"host": "db", "password": "pw"})

    assert config.port == 3306
    assert config.database == "attendance_payroll"
    assert config.describe() == "root@db:3306/attendance_payroll"
