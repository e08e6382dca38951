import logging

from canadapost_api.config import set_logger_level
from canadapost_api.result import ApiResult
from canadapost_api.client import (
    get_base_url,
    get_shipping_rates,
    get_services,
    get_service_details,
    get_tracking_details,
)

set_logger_level(logging.getLogger(__name__))
