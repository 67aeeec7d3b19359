# models/roomingList.py
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Enum
from db.extensions import db
from datetime import datetime
import enum


class RoomingListStatus(enum.Enum):
    Active = 'Active'
    Closed = 'Closed'
    Cancelled = 'Cancelled'


class AgreementType(enum.Enum):
    leisure = 'leisure'
    staff = 'staff'
    artist = 'artist'


VALID_STATUSES = [s.value for s in RoomingListStatus]
VALID_AGREEMENT_TYPES = [a.value for a in AgreementType]

# Older data sources used a wider status vocabulary. Only the bulk loader
# converts these; the API accepts the canonical values alone.
LEGACY_STATUS_MAP = {
    'completed': RoomingListStatus.Closed.value,
    'archived': RoomingListStatus.Closed.value,
    'received': RoomingListStatus.Active.value,
    'Confirmed': RoomingListStatus.Active.value,
}


class RoomingList(db.Model):
    __tablename__ = 'rooming_lists'

    rooming_list_id = Column(Integer, primary_key=True)
    event_id = Column(Integer, ForeignKey('events.event_id'), nullable=False, index=True)
    hotel_id = Column(Integer, nullable=False)
    rfp_name = Column(String(255), nullable=False)
    cut_off_date = Column(Date, nullable=False)
    status = Column(
        Enum(*VALID_STATUSES, name='rooming_list_status_enum'),
        nullable=False,
        default=RoomingListStatus.Active.value
    )
    agreement_type = Column(
        Enum(*VALID_AGREEMENT_TYPES, name='agreement_type_enum'),
        nullable=False
    )
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<RoomingList rooming_list_id={self.rooming_list_id} rfp_name='{self.rfp_name}' status={self.status}>"
