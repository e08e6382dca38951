from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from canadapost_api.xml import ATTRIBUTE, ITEM_TAG

RATING_NAMESPACE = 'http://www.canadapost.ca/ws/ship/rate-v3'


@dataclass(frozen=True)
class Link:
    href: Optional[str] = field(default=None, metadata={ATTRIBUTE: 'href'})
    rel: Optional[str] = field(default=None, metadata={ATTRIBUTE: 'rel'})
    media_type: Optional[str] = field(default=None, metadata={ATTRIBUTE: 'media-type'})


@dataclass(frozen=True)
class NumberRange:
    min: Optional[Decimal] = field(default=None, metadata={ATTRIBUTE: 'min'})
    max: Optional[Decimal] = field(default=None, metadata={ATTRIBUTE: 'max'})


# mailing-scenario

@dataclass(frozen=True)
class OptionRequest:
    option_code: Optional[str] = None
    option_amount: Optional[Decimal] = None


@dataclass(frozen=True)
class Dimensions:
    length: Optional[Decimal] = None
    width: Optional[Decimal] = None
    height: Optional[Decimal] = None


@dataclass(frozen=True)
class ParcelCharacteristics:
    weight: Optional[Decimal] = None
    dimensions: Optional[Dimensions] = None
    unpackaged: Optional[bool] = None
    mailing_tube: Optional[bool] = None
    oversized: Optional[bool] = None


@dataclass(frozen=True)
class Domestic:
    postal_code: Optional[str] = None


@dataclass(frozen=True)
class UnitedStates:
    zip_code: Optional[str] = None


@dataclass(frozen=True)
class International:
    country_code: Optional[str] = None


@dataclass(frozen=True)
class Destination:
    """ Exactly one of the three destination kinds must be set. """

    domestic: Optional[Domestic] = None
    united_states: Optional[UnitedStates] = None
    international: Optional[International] = None

    def __post_init__(self):
        chosen = [kind for kind in (self.domestic, self.united_states, self.international) if kind is not None]
        if len(chosen) != 1:
            raise ValueError(f'destination must have exactly one of domestic, united_states, '
                             f'international, got {len(chosen)}')


@dataclass(frozen=True)
class MailingScenario:
    """
    Input of a rate quote request. Field order follows the element sequence
    expected by the rating service.
    """

    customer_number: Optional[str] = None
    contract_id: Optional[str] = None
    promo_code: Optional[str] = None
    quote_type: Optional[str] = None
    expected_mailing_date: Optional[date] = None
    options: List[OptionRequest] = field(default_factory=list, metadata={ITEM_TAG: 'option'})
    parcel_characteristics: Optional[ParcelCharacteristics] = None
    services: List[str] = field(default_factory=list, metadata={ITEM_TAG: 'service_code'})
    origin_postal_code: Optional[str] = None
    destination: Optional[Destination] = None


# price-quotes

@dataclass(frozen=True)
class Taxes:
    gst: Optional[Decimal] = None
    pst: Optional[Decimal] = None
    hst: Optional[Decimal] = None


@dataclass(frozen=True)
class PriceOption:
    option_code: Optional[str] = None
    option_name: Optional[str] = None
    option_price: Optional[Decimal] = None


@dataclass(frozen=True)
class Adjustment:
    adjustment_code: Optional[str] = None
    adjustment_name: Optional[str] = None
    adjustment_cost: Optional[Decimal] = None


@dataclass(frozen=True)
class PriceDetails:
    base: Optional[Decimal] = None
    taxes: Optional[Taxes] = None
    due: Optional[Decimal] = None
    options: List[PriceOption] = field(default_factory=list, metadata={ITEM_TAG: 'option'})
    adjustments: List[Adjustment] = field(default_factory=list, metadata={ITEM_TAG: 'adjustment'})


@dataclass(frozen=True)
class WeightDetails:
    cubed_weight: Optional[Decimal] = None
    volumetric_weight: Optional[Decimal] = None
    capped_weight: Optional[Decimal] = None


@dataclass(frozen=True)
class ServiceStandard:
    am_delivery: Optional[bool] = None
    guaranteed_delivery: Optional[bool] = None
    expected_transit_time: Optional[int] = None
    expected_delivery_date: Optional[date] = None


@dataclass(frozen=True)
class PriceQuote:
    service_code: Optional[str] = None
    service_link: Optional[Link] = None
    service_name: Optional[str] = None
    price_details: Optional[PriceDetails] = None
    weight_details: Optional[WeightDetails] = None
    service_standard: Optional[ServiceStandard] = None


@dataclass(frozen=True)
class PriceQuotes:
    price_quote: List[PriceQuote] = field(default_factory=list)


# services

@dataclass(frozen=True)
class ServiceSummary:
    service_code: Optional[str] = None
    service_name: Optional[str] = None
    link: Optional[Link] = None


@dataclass(frozen=True)
class Services:
    service: List[ServiceSummary] = field(default_factory=list)


# service

@dataclass(frozen=True)
class ServiceOption:
    option_code: Optional[str] = None
    option_name: Optional[str] = None
    mandatory: Optional[bool] = None
    qualifier_required: Optional[bool] = None
    qualifier_max: Optional[Decimal] = None


@dataclass(frozen=True)
class DimensionalRestrictions:
    length: Optional[NumberRange] = None
    width: Optional[NumberRange] = None
    height: Optional[NumberRange] = None
    length_plus_girth_max: Optional[Decimal] = None
    length_height_width_sum_max: Optional[Decimal] = None
    oversize_limit: Optional[Decimal] = None


@dataclass(frozen=True)
class Restrictions:
    weight_restriction: Optional[NumberRange] = None
    dimensional_restrictions: Optional[DimensionalRestrictions] = None
    density_factor: Optional[Decimal] = None
    can_ship_in_mailing_tube: Optional[bool] = None
    can_ship_unpackaged: Optional[bool] = None
    allowed_as_return_service: Optional[bool] = None


@dataclass(frozen=True)
class Service:
    service_code: Optional[str] = None
    service_name: Optional[str] = None
    comment: Optional[str] = None
    options: List[ServiceOption] = field(default_factory=list, metadata={ITEM_TAG: 'option'})
    restrictions: Optional[Restrictions] = None
