import pytest

from sqlgen.services.crud_generation import parse_create_table

USERS_SQL = "CREATE TABLE Users (UserId INT PRIMARY KEY, Name VARCHAR(100) NOT NULL)"

ORDER_LINES_SQL = """
CREATE TABLE OrderLines (
    OrderId INT NOT NULL,
    LineNo INT NOT NULL,
    Sku VARCHAR(20),
    Price DECIMAL(18,2) NOT NULL,
    CONSTRAINT PK_OrderLines PRIMARY KEY ([OrderId], "LineNo")
)
"""

NO_KEY_SQL = "CREATE TABLE Logs (Message TEXT, CreatedAt DATETIME)"


@pytest.fixture
def users_table():
    return parse_create_table(USERS_SQL)


@pytest.fixture
def order_lines_table():
    return parse_create_table(ORDER_LINES_SQL)


@pytest.fixture
def no_key_table():
    return parse_create_table(NO_KEY_SQL)
