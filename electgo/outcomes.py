from dataclasses import dataclass
from enum import Enum


class DeleteOutcome(str, Enum):
    DELETED = 'deleted'
    AUTO_DELETED = 'auto_deleted'
    ALREADY_REMOVED = 'already_removed'


@dataclass
class DeleteResult:
    outcome: DeleteOutcome
    message: str
    revenue: object = None

    def as_payload(self):
        payload = {'message': self.message, 'outcome': self.outcome.value}
        if self.revenue is not None:
            payload['revenue'] = self.revenue.as_dict()
        return payload
