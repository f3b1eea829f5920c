"""
Reversal Table Service
Evaluate a static collection of reversal requests for display

Every record is evaluated on its own. A record that cannot be evaluated
is shown as not eligible with status "unknown"; it never aborts the table.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from refund_engine.domain.models import Err, RefundRules
from refund_engine.domain.schemas import ReversalRequestIn, ReversalRow
from refund_engine.domain.services.config_engine import get_default_rules
from refund_engine.domain.services.eligibility_engine import evaluate_refund_request

logger = logging.getLogger(__name__)


class ReversalTableService:
    def __init__(self, data_file: Path, rules: Optional[RefundRules] = None):
        self.data_file = Path(data_file)
        self.rules = rules or get_default_rules()

    def load_records(self) -> List[Dict[str, Any]]:
        """Raw records from the JSON data file"""
        if not self.data_file.exists():
            raise FileNotFoundError(f"Reversal data not found: {self.data_file}")

        with open(self.data_file, 'r') as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of reversal records in {self.data_file}")
        return data

    def build_rows(self) -> List[ReversalRow]:
        rows = [self.evaluate_record(record) for record in self.load_records()]
        eligible = sum(1 for row in rows if row.eligible)
        unknown = sum(1 for row in rows if row.status == "unknown")
        logger.info(
            "REVERSAL_TABLE_BUILT | records=%d eligible=%d unknown=%d",
            len(rows), eligible, unknown,
        )
        return rows

    def evaluate_record(self, record: Any) -> ReversalRow:
        try:
            request = ReversalRequestIn.model_validate(record)
        except ValidationError as exc:
            logger.warning(f"⚠️  Skipping malformed reversal record: {exc.error_count()} errors")
            return ReversalRow(
                name=self._record_name(record),
                customer_tz="",
                signup_date="",
                source="",
                investment_date="",
                investment_time="",
                request_date="",
                request_time="",
                eligible=False,
                status="unknown",
                error_kind="invalid_record",
                error_message=f"{exc.error_count()} field errors",
            )

        result = evaluate_refund_request(request.to_domain(), self.rules)
        fields = request.model_dump()
        if isinstance(result, Err):
            return ReversalRow(
                **fields,
                eligible=False,
                status="unknown",
                error_kind=result.error.kind,
                error_message=result.error.message,
            )

        eligible = result.value.eligible
        return ReversalRow(
            **fields,
            eligible=eligible,
            status="eligible" if eligible else "not_eligible",
        )

    @staticmethod
    def _record_name(record: Any) -> str:
        if not isinstance(record, dict):
            return ""
        return str(record.get("name") or record.get("Name") or "")
