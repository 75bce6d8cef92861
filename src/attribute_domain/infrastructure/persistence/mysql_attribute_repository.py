# attribute_domain/infrastructure/persistence/mysql_attribute_repository.py
"""MySQL implementations of the attribute repositories."""

import dataclasses
import logging
from enum import Enum
from typing import TypeVar

import mysql.connector
from mysql.connector import Error

from src.attribute_domain.domain.entities.attribute import (
    CustomerAttribute,
    CustomerAttributeValue,
    VendorAttribute,
    VendorAttributeValue,
)
from src.attribute_domain.domain.repositories.repository import IRepository
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import DatabaseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ATTRIBUTE_COLUMNS_DDL = """
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            name VARCHAR(400) NOT NULL,
            is_required TINYINT(1) NOT NULL DEFAULT 0,
            attribute_control_type INT NOT NULL,
            display_order INT NOT NULL DEFAULT 0,
            INDEX (display_order)
"""

ATTRIBUTE_VALUE_COLUMNS_DDL = """
            id INT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            attribute_id INT UNSIGNED NOT NULL,
            name VARCHAR(400) NOT NULL,
            is_pre_selected TINYINT(1) NOT NULL DEFAULT 0,
            display_order INT NOT NULL DEFAULT 0,
            INDEX (attribute_id),
            INDEX (display_order)
"""


class MySQLRepository(IRepository[T]):
    """
    Table-per-entity repository. Subclasses name the entity dataclass, the
    table (without the configured prefix) and its column definitions; the
    columns are the dataclass fields.
    """

    entity_type: type
    table_suffix: str
    columns_ddl: str

    def __init__(self) -> None:
        self._connection = None

    @property
    def table_name(self) -> str:
        return f"{settings.DB_TABLE_PREFIX}{self.table_suffix}"

    def _get_connection(self):
        """Establishes or returns an active MySQL database connection."""
        if not self._connection or not self._connection.is_connected():
            try:
                self._connection = mysql.connector.connect(
                    host=settings.DB_HOST,
                    database=settings.DB_DATABASE,
                    user=settings.DB_USER,
                    password=settings.DB_PASSWORD,
                    autocommit=False,
                    charset="utf8mb4",
                    use_unicode=True,
                )
            except Error as e:
                raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
        return self._connection

    def _to_row(self, entity: T) -> dict:
        row = {}
        for f in dataclasses.fields(entity):
            if f.name == "id":
                continue
            value = getattr(entity, f.name)
            row[f.name] = value.value if isinstance(value, Enum) else value
        return row

    def _from_row(self, row: dict) -> T:
        return self.entity_type(**row)

    def create_tables(self) -> None:
        """Creates the table if it does not exist yet."""
        create_table_query = f"""
        CREATE TABLE IF NOT EXISTS {self.table_name} ({self.columns_ddl}
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """

        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(create_table_query)
            conn.commit()
            logger.info(f"Table {self.table_name} checked/created.")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error creating table {self.table_name}: {e}", original_exception=e)
        finally:
            cursor.close()

    def table(self) -> list[T]:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute(f"SELECT * FROM {self.table_name} ORDER BY display_order, id")
            return [self._from_row(row) for row in cursor.fetchall()]
        except Error as e:
            raise DatabaseError(f"Error fetching rows from {self.table_name}: {e}", original_exception=e)
        finally:
            cursor.close()

    def get_by_id(self, entity_id: int) -> T | None:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)
        try:
            cursor.execute(f"SELECT * FROM {self.table_name} WHERE id = %s", (entity_id,))
            row = cursor.fetchone()
            return self._from_row(row) if row else None
        except Error as e:
            raise DatabaseError(f"Error fetching {self.table_name} row {entity_id}: {e}", original_exception=e)
        finally:
            cursor.close()

    def insert(self, entity: T) -> None:
        row = self._to_row(entity)
        columns = ", ".join(row.keys())
        placeholders = ", ".join(["%s"] * len(row))

        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(f"INSERT INTO {self.table_name} ({columns}) VALUES ({placeholders})", list(row.values()))
            conn.commit()
            entity.id = cursor.lastrowid
            logger.debug(f"Inserted {self.table_name} row {entity.id}")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error inserting into {self.table_name}: {e}", original_exception=e)
        finally:
            cursor.close()

    def update(self, entity: T) -> None:
        row = self._to_row(entity)
        update_set = ", ".join([f"{col} = %s" for col in row])

        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(f"UPDATE {self.table_name} SET {update_set} WHERE id = %s", [*row.values(), entity.id])
            conn.commit()
            if cursor.rowcount == 0:
                logger.warning(f"No rows affected updating {self.table_name} row {entity.id}")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error updating {self.table_name} row {entity.id}: {e}", original_exception=e)
        finally:
            cursor.close()

    def delete(self, entity: T) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(f"DELETE FROM {self.table_name} WHERE id = %s", (entity.id,))
            conn.commit()
            if cursor.rowcount == 0:
                logger.warning(f"{self.table_name} row {entity.id} not found for deletion")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error deleting {self.table_name} row {entity.id}: {e}", original_exception=e)
        finally:
            cursor.close()

    def __del__(self) -> None:
        if self._connection and self._connection.is_connected():
            self._connection.close()


class MySQLCustomerAttributeRepository(MySQLRepository[CustomerAttribute]):
    entity_type = CustomerAttribute
    table_suffix = "customer_attribute"
    columns_ddl = ATTRIBUTE_COLUMNS_DDL


class MySQLCustomerAttributeValueRepository(MySQLRepository[CustomerAttributeValue]):
    entity_type = CustomerAttributeValue
    table_suffix = "customer_attribute_value"
    columns_ddl = ATTRIBUTE_VALUE_COLUMNS_DDL


class MySQLVendorAttributeRepository(MySQLRepository[VendorAttribute]):
    entity_type = VendorAttribute
    table_suffix = "vendor_attribute"
    columns_ddl = ATTRIBUTE_COLUMNS_DDL


class MySQLVendorAttributeValueRepository(MySQLRepository[VendorAttributeValue]):
    entity_type = VendorAttributeValue
    table_suffix = "vendor_attribute_value"
    columns_ddl = ATTRIBUTE_VALUE_COLUMNS_DDL
