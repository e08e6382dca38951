from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from canadapost_api.xml import ITEM_TAG

TRACKING_NAMESPACE = 'http://www.canadapost.ca/ws/track'


@dataclass(frozen=True)
class DeliveryOption:
    delivery_option: Optional[str] = None
    delivery_option_description: Optional[str] = None


@dataclass(frozen=True)
class Occurrence:
    event_identifier: Optional[str] = None
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    event_time_zone: Optional[str] = None
    event_description: Optional[str] = None
    signatory_name: Optional[str] = None
    event_site: Optional[str] = None
    event_province: Optional[str] = None
    event_retail_location_id: Optional[str] = None
    event_retail_name: Optional[str] = None


@dataclass(frozen=True)
class TrackingDetail:
    pin: Optional[str] = None
    active_exists: Optional[bool] = None
    archive_exists: Optional[bool] = None
    changed_expected_date: Optional[date] = None
    destination_postal_id: Optional[str] = None
    expected_delivery_date: Optional[date] = None
    changed_expected_delivery_reason: Optional[str] = None
    mailed_by_customer_number: Optional[str] = None
    mailed_on_behalf_of_customer_number: Optional[str] = None
    original_pin: Optional[str] = None
    service_name: Optional[str] = None
    service_name_2: Optional[str] = None
    customer_ref_1: Optional[str] = None
    customer_ref_2: Optional[str] = None
    return_pin: Optional[str] = None
    signature_image_exists: Optional[bool] = None
    suppress_signature: Optional[bool] = None
    delivery_options: List[DeliveryOption] = field(default_factory=list, metadata={ITEM_TAG: 'item'})
    significant_events: List[Occurrence] = field(default_factory=list, metadata={ITEM_TAG: 'occurrence'})

    @property
    def latest_event(self) -> Optional[Occurrence]:
        """ The carrier lists events newest first. """
        return self.significant_events[0] if self.significant_events else None
