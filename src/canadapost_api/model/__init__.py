from canadapost_api.model.messages import Message, Messages, MESSAGES_NAMESPACE
from canadapost_api.model.rating import (
    RATING_NAMESPACE,
    Adjustment,
    Destination,
    Dimensions,
    DimensionalRestrictions,
    Domestic,
    International,
    Link,
    MailingScenario,
    NumberRange,
    OptionRequest,
    ParcelCharacteristics,
    PriceDetails,
    PriceOption,
    PriceQuote,
    PriceQuotes,
    Restrictions,
    Service,
    ServiceOption,
    ServiceStandard,
    ServiceSummary,
    Services,
    Taxes,
    UnitedStates,
    WeightDetails,
)
from canadapost_api.model.tracking import TRACKING_NAMESPACE, DeliveryOption, Occurrence, TrackingDetail
