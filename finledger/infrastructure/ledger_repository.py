"""SQLAlchemy-backed repository for ledger, travel box and asset records."""

from datetime import date
from decimal import Decimal

from sqlalchemy import text

from finledger.application.ports.database import DatabaseEnginePort
from finledger.application.ports.ledger_repository import LedgerRepositoryPort
from finledger.domain.models import Account, AssetRecord, Entry, MovementRecord


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository reading ledger tables through the shared engine.

    Hidden rows (``oculto``) are filtered in SQL; entries and advances are
    folded into their parent ``Account``.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_current_accounts(
        self,
        owner_id: str | None = None,
    ) -> list[Account]:
        """Return visible running accounts with their entries."""
        where_sql, params = self._build_filters(
            "c",
            user_id=owner_id,
        )
        accounts_query = text(
            f"""
            SELECT c.id, c.tipo, c.fornecedor_cliente, c.setor,
                   e.nome_empresa
            FROM conta_corrente c
            LEFT JOIN empresa e ON e.id = c.empresa_id
            WHERE {where_sql}
            ORDER BY c.id
            """
        )
        entries_query = text(
            f"""
            SELECT l.conta_corrente_id AS account_id, l.data,
                   l.credito AS credit, l.debito AS debit,
                   l.numero_documento, l.observacao
            FROM lancamento l
            JOIN conta_corrente c ON c.id = l.conta_corrente_id
            WHERE {where_sql}
            ORDER BY l.data
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            account_rows = conn.execute(accounts_query, params).all()
            entry_rows = conn.execute(entries_query, params).all()

        entries = self._group_entries(entry_rows)
        return [
            Account(
                id=str(row.id),
                entries=tuple(entries.get(str(row.id), ())),
                attributes={
                    "type": row.tipo,
                    "supplier": row.fornecedor_cliente,
                    "sector": row.setor,
                    "company": row.nome_empresa,
                },
            )
            for row in account_rows
        ]

    def fetch_travel_boxes(
        self,
        owner_id: str | None = None,
        employee_id: int | None = None,
    ) -> list[Account]:
        """Return visible travel boxes with entries and advances."""
        where_sql, params = self._build_filters(
            "b",
            user_id=owner_id,
            funcionario_id=employee_id,
        )
        boxes_query = text(
            f"""
            SELECT b.id, b.funcionario_id, b.numero_caixa, b.destino,
                   b.saldo_anterior, e.nome_empresa
            FROM caixa_viagem b
            LEFT JOIN empresa e ON e.id = b.empresa_id
            WHERE {where_sql}
            ORDER BY b.funcionario_id, b.numero_caixa
            """
        )
        entries_query = text(
            f"""
            SELECT l.caixa_viagem_id AS account_id, l.data,
                   l.entrada AS credit, l.saida AS debit,
                   l.numero_documento, l.observacao
            FROM viagem_lancamento l
            JOIN caixa_viagem b ON b.id = l.caixa_viagem_id
            WHERE {where_sql}
            ORDER BY l.data
            """
        )
        advances_query = text(
            f"""
            SELECT a.caixa_viagem_id AS account_id, a.saida
            FROM adiantamento a
            JOIN caixa_viagem b ON b.id = a.caixa_viagem_id
            WHERE {where_sql}
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            box_rows = conn.execute(boxes_query, params).all()
            entry_rows = conn.execute(entries_query, params).all()
            advance_rows = conn.execute(advances_query, params).all()

        entries = self._group_entries(entry_rows)
        advances: dict[str, list] = {}
        for row in advance_rows:
            advances.setdefault(str(row.account_id), []).append(row.saida)

        return [
            Account(
                id=str(row.id),
                entries=tuple(entries.get(str(row.id), ())),
                attributes={
                    "destination": row.destino,
                    "company": row.nome_empresa,
                },
                previous_balance=row.saldo_anterior,
                employee_id=row.funcionario_id,
                box_number=row.numero_caixa,
                advances=tuple(advances.get(str(row.id), ())),
            )
            for row in box_rows
        ]

    def update_previous_balance(self, box_id: str, value: Decimal) -> None:
        """Persist the carried-forward balance of a travel box."""
        query = text(
            """
            UPDATE caixa_viagem
            SET saldo_anterior = :value
            WHERE id = :box_id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(query, {"value": value, "box_id": box_id})

    def fetch_assets(self) -> list[AssetRecord]:
        """Return visible assets with the sector of their holder."""
        query = text(
            """
            SELECT p.id, p.tipo, r.setor
            FROM patrimonio p
            LEFT JOIN colaborador r ON r.id = p.responsavel_id
            WHERE p.oculto = false
            ORDER BY p.id
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            AssetRecord(id=str(row.id), asset_type=row.tipo, sector=row.setor)
            for row in rows
        ]

    def fetch_movements(self, since: date | None = None) -> list[MovementRecord]:
        """Return asset movements created on or after ``since``."""
        base_sql = "SELECT m.id, m.created_at FROM movimentacao m WHERE 1=1"
        params: dict[str, date] = {}
        if since:
            base_sql += " AND m.created_at >= :since"
            params["since"] = since
        base_sql += " ORDER BY m.created_at"
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(base_sql), params).all()
        return [
            MovementRecord(id=str(row.id), created_at=row.created_at)
            for row in rows
        ]

    @staticmethod
    def _build_filters(alias: str, **filters) -> tuple[str, dict]:
        """Build the shared WHERE clause for a parent table.

        Args:
            alias: SQL alias of the parent table.
            **filters: Column filters; None values are ignored.

        Returns:
            tuple[str, dict]: SQL condition and bound parameters.
        """
        clauses = [f"{alias}.oculto = false"]
        params = {}
        for column, value in filters.items():
            if value is None:
                continue
            clauses.append(f"{alias}.{column} = :{column}")
            params[column] = value
        return " AND ".join(clauses), params

    @staticmethod
    def _group_entries(rows) -> dict[str, list[Entry]]:
        grouped: dict[str, list[Entry]] = {}
        for row in rows:
            grouped.setdefault(str(row.account_id), []).append(
                Entry(
                    date=row.data,
                    credit=row.credit,
                    debit=row.debit,
                    document_number=row.numero_documento,
                    note=row.observacao,
                )
            )
        return grouped


__all__ = ["SqlAlchemyLedgerRepository"]
