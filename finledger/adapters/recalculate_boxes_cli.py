"""CLI adapter recalculating the carried-forward balances of travel boxes."""

import os

from finledger.infrastructure.container import build_recalculate_boxes_use_case
from finledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finledger.utils.decimal_utils import quantize_currency


def _parse_employee_id(value: str | None) -> int | None:
    """Parse the optional employee filter.

    Args:
        value: Raw ``LEDGER_EMPLOYEE_ID`` value.

    Returns:
        int | None: Employee id, or None when the variable is unset.

    Raises:
        ValueError: If the value is set but is not an integer.
    """
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(
            f"Invalid employee id '{value}'. Expected an integer."
        ) from None


def main() -> None:
    """Run the recalculation use case and print the new balances."""
    logger = get_app_logger()
    raw_employee_id = os.getenv("LEDGER_EMPLOYEE_ID")
    try:
        employee_id = _parse_employee_id(raw_employee_id)
    except ValueError as exc:
        logger.error(str(exc))
        return
    get_usage_logger().info(
        f"recalculate-boxes employee={employee_id or 'all'}"
    )

    try:
        use_case = build_recalculate_boxes_use_case()
        result = use_case.execute(employee_id=employee_id)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    for box in result.boxes:
        print(
            f"employee={box.employee_id} box={box.box_number}: "
            f"previous={quantize_currency(box.previous_balance)}, "
            f"ending={quantize_currency(box.ending_balance)}"
        )
    print(
        f"Recalculated {len(result.boxes)} travel boxes "
        f"({result.updated_count} updated)."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
