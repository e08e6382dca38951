"""
Canada Post REST/XML API client.

Every operation is a single blocking round trip. Failures are never raised,
they come back as an ApiResult carrying the error description.
"""

import logging
from xml.etree import ElementTree

import requests

from canadapost_api import config
from canadapost_api.auth import ApiKeyAuth
from canadapost_api.model import (
    RATING_NAMESPACE,
    MailingScenario,
    Messages,
    PriceQuotes,
    Service,
    Services,
    TrackingDetail,
)
from canadapost_api.result import ApiResult, describe_exception, format_carrier_errors
from canadapost_api.xml import XmlMarshaller, XmlTrimmer, prettify_xml, to_xml_document

LOGGER = logging.getLogger(__name__)

PRODUCTION_URL = 'https://soa-gw.canadapost.ca'
SANDBOX_URL = 'https://ct.soa-gw.canadapost.ca'

RATING_MEDIA_TYPE = 'application/vnd.cpc.ship.rate-v3+xml'
TRACKING_MEDIA_TYPE = 'application/vnd.cpc.track+xml'

MARSHALLER = XmlMarshaller()


def get_base_url(use_sandbox: bool) -> str:
    return SANDBOX_URL if use_sandbox else PRODUCTION_URL


def get_shipping_rates(scenario: MailingScenario, api_key: str, use_sandbox: bool,
                       timeout: float = None, language: str = None) -> ApiResult[PriceQuotes]:
    """ Request rate quotes for a mailing scenario. """
    try:
        body = to_xml_document(MARSHALLER.dataclass_to_xml(scenario, 'mailing-scenario', RATING_NAMESPACE))
    except Exception as e:
        LOGGER.error(f"Could not serialize mailing scenario: {describe_exception(e)}")
        return ApiResult.failure(describe_exception(e))

    url = f"{get_base_url(use_sandbox)}/rs/ship/price"
    result = _request(body, api_key, 'POST', RATING_MEDIA_TYPE, url, timeout, language)
    return _deserialize(result, 'price-quotes', PriceQuotes)


def get_services(country_code: str, api_key: str, use_sandbox: bool,
                 timeout: float = None, language: str = None) -> ApiResult[Services]:
    """ List the services available for a destination country (all services when empty). """
    url = f"{get_base_url(use_sandbox)}/rs/ship/service"
    if country_code:
        url += f"?country={country_code}"

    result = _request(None, api_key, 'GET', RATING_MEDIA_TYPE, url, timeout, language)
    return _deserialize(result, 'services', Services)


def get_service_details(api_key: str, url: str, accept_type: str,
                        timeout: float = None, language: str = None) -> ApiResult[Service]:
    """
    Fetch a single service description.

    ``url`` and ``accept_type`` are usually the ``href`` and ``media_type`` of
    a link returned by get_services and are used verbatim.
    """
    result = _request(None, api_key, 'GET', accept_type, url, timeout, language)
    return _deserialize(result, 'service', Service)


def get_tracking_details(tracking_number: str, api_key: str, use_sandbox: bool,
                         timeout: float = None, language: str = None) -> ApiResult[TrackingDetail]:
    url = f"{get_base_url(use_sandbox)}/vis/track/pin/{tracking_number}/detail"
    result = _request(None, api_key, 'GET', TRACKING_MEDIA_TYPE, url, timeout, language)
    return _deserialize(result, 'tracking-detail', TrackingDetail)


def _request(body, api_key, method, accept_type, url, timeout=None, language=None) -> ApiResult[requests.Response]:
    headers = {
        'Accept': accept_type,
        'Accept-Language': language or config.CANADAPOST_LANGUAGE,
    }
    data = None
    if method == 'POST':
        headers['Content-Type'] = accept_type
        data = body.encode('utf-8')
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug(f"Request body:\n{prettify_xml(body)}")

    LOGGER.info(f"{method} {url}")
    try:
        response = requests.request(
            method=method,
            url=url,
            headers=headers,
            data=data,
            auth=ApiKeyAuth(api_key),
            timeout=timeout or config.CANADAPOST_TIMEOUT
        )
    except Exception as e:
        LOGGER.error(f"{method} {url} failed: {describe_exception(e)}")
        return ApiResult.failure(describe_exception(e))

    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug("Response %s: %s", response.status_code, response.text)
    if 200 <= response.status_code < 300:
        return ApiResult.success(response)

    errors = _read_carrier_errors(response)
    LOGGER.error(f"{method} {url} returned {response.status_code}: {errors}")
    return ApiResult.failure(errors)


def _read_carrier_errors(response: requests.Response) -> str:
    try:
        messages = _parse(response.content, 'messages', Messages)
    except Exception as e:
        return describe_exception(e)

    errors = format_carrier_errors(messages)
    if not errors:
        return f"HTTP {response.status_code} {response.reason}"
    return errors


def _deserialize(result: ApiResult[requests.Response], root_tag: str, data_class):
    if not result.ok:
        return ApiResult.failure(result.errors)

    try:
        return ApiResult.success(_parse(result.value.content, root_tag, data_class))
    except Exception as e:
        LOGGER.error(f"Could not read <{root_tag}> response: {describe_exception(e)}")
        return ApiResult.failure(describe_exception(e))


def _parse(content: bytes, root_tag: str, data_class):
    element = ElementTree.fromstring(content)
    XmlTrimmer.remove_namespaces(element)
    if element.tag != root_tag:
        raise ValueError(f"Unexpected <{element.tag}> element, expected <{root_tag}>")
    return MARSHALLER.xml_to_dataclass(element, data_class)
