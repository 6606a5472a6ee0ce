"""Tableland table names."""

from dataclasses import dataclass


class TableNameError(ValueError):
    """A table name that does not follow ``{prefix}_{chainId}_{tableId}``."""


@dataclass(frozen=True)
class TableName:
    """Parsed Tableland table name.

    The prefix may itself contain underscores (or be empty); the last two
    ``_``-separated parts are always the chain id and the table id.
    """

    prefix: str
    chain_id: int
    table_id: str

    @property
    def name(self) -> str:
        return f"{self.prefix}_{self.chain_id}_{self.table_id}"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, name: str) -> "TableName":
        """Split ``name`` into prefix, chain id and table id.

        Raises:
            TableNameError: If the name does not end in ``_<digits>_<digits>``
        """
        parts = name.rsplit("_", 2) if name else []
        if len(parts) != 3:
            raise TableNameError(f"Invalid table name: {name}")

        prefix, chain_id, table_id = parts
        if not (chain_id.isdigit() and chain_id.isascii()):
            raise TableNameError(f"Invalid table name: {name}")
        if not (table_id.isdigit() and table_id.isascii()):
            raise TableNameError(f"Invalid table name: {name}")

        return cls(prefix=prefix, chain_id=int(chain_id), table_id=table_id)
