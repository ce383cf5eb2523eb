import logging
from typing import Any, List, Optional

from clinic.core.validation import EHRRecordValidator
from clinic.domain.interfaces import IEHRRecordSetRepository

logger = logging.getLogger(__name__)


class EHRService:
    """Append-only electronic health records, one record set per patient."""

    def __init__(self, ehr_repo: IEHRRecordSetRepository):
        self.ehr_repo = ehr_repo
        self.validator = EHRRecordValidator()

    def append_record(self, patient_id: Optional[Any], text: Any) -> None:
        data = self.validator.clean({"patient_id": patient_id, "text": text})

        record_set = self.ehr_repo.get_or_create(data["patient_id"])
        self.ehr_repo.update(
            record_set.patient_id, lambda rs: rs.add_record(data["text"])
        )

        logger.info(
            "EHR record appended",
            extra={
                "context": {
                    "patient_id": record_set.patient_id,
                    "record_count": len(record_set.records),
                }
            },
        )

    def load_records(self, patient_id: Optional[Any]) -> List[str]:
        """Return the patient's records in entry order.

        Loading materialises an empty record set for a patient seen for the
        first time.
        """
        data = self.validator.clean({"patient_id": patient_id})
        record_set = self.ehr_repo.get_or_create(data["patient_id"])
        return list(record_set.records)
