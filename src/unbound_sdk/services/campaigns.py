# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Messaging campaigns: carrier registration for A2P messaging.

Reachable as ``sdk.messaging.campaigns``::

    toll_free               toll-free verification campaigns
    ten_dlc                 10DLC phone number campaign status
    ten_dlc.brands          10DLC brand registration and vetting
    ten_dlc.campaigns       10DLC campaign management and number assignment

Update operations send only the fields actually passed.
"""

from __future__ import annotations

from ..interface import BaseService, Endpoint
from ..validation import Param, Schema

TOLL_FREE_PATH = "/messaging/campaigns/tollfree"
BRAND_PATH = "/messaging/campaigns/10dlc/brand"
CAMPAIGN_PATH = "/messaging/campaigns/10dlc/campaign"

LIST_SCHEMA = Schema(
    page=Param("number"),
    limit=Param("number"),
    name=Param("string"),
    status=Param("string"),
    operator_type=Param("string"),
)

_CAMPAIGN = Schema(campaign_id=Param("string", required=True))
_BRAND = Schema(brand_id=Param("string", required=True))
_PHONE_NUMBER = Schema(phone_number=Param("string", required=True))

# -----------------------------------------------------------------------------
# Toll-free
# -----------------------------------------------------------------------------

TOLL_FREE_UPDATE_FIELDS = Schema(
    name=Param("string"),
    campaign_description=Param("string"),
    address1=Param("string"),
    address2=Param("string"),
    city=Param("string"),
    state=Param("string"),
    zip=Param("string"),
    poc_first_name=Param("string"),
    poc_last_name=Param("string"),
    poc_phone_number=Param("string"),
    poc_email=Param("string"),
    business_name=Param("string"),
    website=Param("string"),
    message_volume=Param("string"),
    opt_in_workflow=Param("string"),
    opt_in_workflow_urls=Param("array"),
    phone_numbers=Param("array"),
    production_message_example=Param("string"),
    use_case=Param("string"),
    use_case_description=Param("string"),
    webhook_url=Param("string"),
)


class TollFreeCampaignsService(BaseService):
    name = "toll_free"

    create = Endpoint(
        "POST",
        TOLL_FREE_PATH,
        Schema(
            company_name=Param("string", required=True),
            phone_number=Param("string", required=True),
            description=Param("string", required=True),
            message_flow=Param("string", required=True),
            help_message=Param("string"),
            opt_in_keywords=Param("array"),
            opt_out_keywords=Param("array"),
            website=Param("string"),
        ),
    )

    get = Endpoint("GET", TOLL_FREE_PATH + "/{campaign_id}", _CAMPAIGN, args=("campaign_id",))

    update = Endpoint(
        "PUT",
        TOLL_FREE_PATH + "/{campaign_id}",
        _CAMPAIGN.extend(**TOLL_FREE_UPDATE_FIELDS.params),
        args=("campaign_id",),
    )

    delete = Endpoint(
        "DELETE", TOLL_FREE_PATH + "/{campaign_id}", _CAMPAIGN, args=("campaign_id",)
    )

    list = Endpoint("GET", TOLL_FREE_PATH, LIST_SCHEMA)

    refresh_status = Endpoint(
        "GET", TOLL_FREE_PATH + "/refresh/{campaign_id}", _CAMPAIGN, args=("campaign_id",)
    )

    get_phone_number_campaign_status = Endpoint(
        "GET",
        TOLL_FREE_PATH + "/phoneNumber/{phone_number}/campaignStatus",
        _PHONE_NUMBER,
        args=("phone_number",),
    )


# -----------------------------------------------------------------------------
# 10DLC
# -----------------------------------------------------------------------------

BRAND_FIELDS = Schema(
    name=Param("string"),
    entity_type=Param("string"),
    csp_id=Param("string"),
    company_name=Param("string"),
    ein=Param("string"),
    address1=Param("string"),
    address2=Param("string"),
    city=Param("string"),
    state=Param("string"),
    postal_code=Param("string"),
    country=Param("string"),
    poc_first_name=Param("string"),
    poc_last_name=Param("string"),
    poc_email=Param("string"),
    poc_phone=Param("string"),
    stock_symbol=Param("string"),
    stock_exchange=Param("string"),
    website=Param("string"),
    vertical=Param("string"),
    alt_business_id=Param("string"),
    alt_business_id_type=Param("string"),
    brand_relationship=Param("string"),
)

BRAND_CREATE_SCHEMA = BRAND_FIELDS.extend(
    **{
        name: Param("string", required=True)
        for name in (
            "name",
            "entity_type",
            "company_name",
            "address1",
            "city",
            "state",
            "postal_code",
            "country",
            "poc_email",
            "poc_phone",
            "vertical",
        )
    }
)

BRAND_UPDATE_SCHEMA = _BRAND.extend(
    **BRAND_FIELDS.params,
    business_contact_email=Param("string"),
    first_name=Param("string"),
    last_name=Param("string"),
    mobile_phone=Param("string"),
)


class TenDlcBrandsService(BaseService):
    """10DLC brands: the business identity campaigns are registered under."""

    name = "brands"

    list = Endpoint("GET", BRAND_PATH, LIST_SCHEMA)

    create = Endpoint("POST", BRAND_PATH, BRAND_CREATE_SCHEMA)

    get = Endpoint("GET", BRAND_PATH + "/{brand_id}", _BRAND, args=("brand_id",))

    update = Endpoint("PUT", BRAND_PATH + "/{brand_id}", BRAND_UPDATE_SCHEMA, args=("brand_id",))

    delete = Endpoint("DELETE", BRAND_PATH + "/{brand_id}", _BRAND, args=("brand_id",))

    revet = Endpoint("PUT", BRAND_PATH + "/{brand_id}/revet", _BRAND, args=("brand_id",))

    get_feedback = Endpoint(
        "GET", BRAND_PATH + "/{brand_id}/feedback", _BRAND, args=("brand_id",)
    )

    create_external_vetting = Endpoint(
        "POST",
        BRAND_PATH + "/{brand_id}/externalVetting",
        _BRAND.extend(vetting_data=Param("object")),
        args=("brand_id", "vetting_data"),
        payload="vetting_data",
    )

    get_external_vetting_responses = Endpoint(
        "GET",
        BRAND_PATH + "/{brand_id}/externalvetting/responses",
        _BRAND,
        args=("brand_id",),
    )

    resend_2fa = Endpoint(
        "POST", BRAND_PATH + "/{brand_id}/resend-2fa", _BRAND, args=("brand_id",)
    )


CAMPAIGN_UPDATE_FIELDS = Schema(
    name=Param("string"),
    description=Param("string"),
    message_flow=Param("string"),
    samples=Param("array"),
    webhook_url=Param("string"),
    help_message=Param("string"),
    opt_in_message=Param("string"),
    opt_out_message=Param("string"),
    help_keywords=Param("array"),
    optin_keywords=Param("array"),
    optout_keywords=Param("array"),
    affiliate_marketing=Param("boolean"),
    age_gated=Param("boolean"),
    direct_lending=Param("boolean"),
    embedded_link=Param("boolean"),
    embedded_phone=Param("boolean"),
    number_pool=Param("boolean"),
    auto_renewal=Param("boolean"),
    subscriber_help=Param("boolean"),
    subscriber_optin=Param("boolean"),
    subscriber_optout=Param("boolean"),
)

_PHONE_NUMBER_DATA = _CAMPAIGN.extend(phone_number_data=Param("object", required=True))


def _phone_number_endpoint(method: str) -> Endpoint:
    return Endpoint(
        method,
        CAMPAIGN_PATH + "/{campaign_id}/phoneNumber",
        _PHONE_NUMBER_DATA,
        args=("campaign_id", "phone_number_data"),
        payload="phone_number_data",
    )


class TenDlcCampaignManagementService(BaseService):
    """10DLC campaigns and the phone numbers assigned to them."""

    name = "campaigns"

    list = Endpoint("GET", CAMPAIGN_PATH, LIST_SCHEMA)

    create = Endpoint(
        "POST",
        CAMPAIGN_PATH,
        Schema(
            brand_id=Param("string", required=True),
            description=Param("string", required=True),
            message_flow=Param("string", required=True),
            help_message=Param("string"),
            opt_in_message=Param("string"),
            opt_out_message=Param("string"),
            use_case=Param("string"),
            vertical=Param("string"),
        ),
    )

    get = Endpoint("GET", CAMPAIGN_PATH + "/{campaign_id}", _CAMPAIGN, args=("campaign_id",))

    update = Endpoint(
        "PUT",
        CAMPAIGN_PATH + "/{campaign_id}",
        _CAMPAIGN.extend(**CAMPAIGN_UPDATE_FIELDS.params),
        args=("campaign_id",),
    )

    delete = Endpoint(
        "DELETE", CAMPAIGN_PATH + "/{campaign_id}", _CAMPAIGN, args=("campaign_id",)
    )

    get_operation_status = Endpoint(
        "GET", CAMPAIGN_PATH + "/{campaign_id}/operationStatus", _CAMPAIGN, args=("campaign_id",)
    )

    get_mno_meta_data = Endpoint(
        "GET", CAMPAIGN_PATH + "/{campaign_id}/mnoMetaData", _CAMPAIGN, args=("campaign_id",)
    )

    add_phone_number = _phone_number_endpoint("POST")

    update_phone_number = _phone_number_endpoint("PUT")

    remove_phone_number = _phone_number_endpoint("DELETE")


class TenDlcCampaignsService(BaseService):
    name = "ten_dlc"
    children = {"brands": TenDlcBrandsService, "campaigns": TenDlcCampaignManagementService}

    get_phone_number_campaign_status = Endpoint(
        "GET",
        "/messaging/campaigns/10dlc/phoneNumber/{phone_number}/campaignStatus",
        _PHONE_NUMBER,
        args=("phone_number",),
    )


class CampaignsService(BaseService):
    name = "campaigns"
    children = {"toll_free": TollFreeCampaignsService, "ten_dlc": TenDlcCampaignsService}
