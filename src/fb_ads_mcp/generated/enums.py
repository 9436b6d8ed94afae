# Code generated by fb_ads_mcp.codegen. DO NOT EDIT.
"""Enumerations declared by the Graph API specification."""

from __future__ import annotations

from enum import Enum


class AdActivityCategory(str, Enum):
    """Values of ``AdActivity_category``."""

    ACCOUNT = "ACCOUNT"
    AD = "AD"
    AD_SET = "AD_SET"
    AUDIENCE = "AUDIENCE"
    BID = "BID"
    BUDGET = "BUDGET"
    CAMPAIGN = "CAMPAIGN"
    DATE = "DATE"
    STATUS = "STATUS"
    TARGETING = "TARGETING"


class AdCreativeCallToActionType(str, Enum):
    """Values of ``AdCreative_call_to_action_type``."""

    APPLY_NOW = "APPLY_NOW"
    BOOK_TRAVEL = "BOOK_TRAVEL"
    CONTACT_US = "CONTACT_US"
    DOWNLOAD = "DOWNLOAD"
    GET_OFFER = "GET_OFFER"
    GET_QUOTE = "GET_QUOTE"
    INSTALL_APP = "INSTALL_APP"
    LEARN_MORE = "LEARN_MORE"
    LISTEN_NOW = "LISTEN_NOW"
    MESSAGE_PAGE = "MESSAGE_PAGE"
    NO_BUTTON = "NO_BUTTON"
    ORDER_NOW = "ORDER_NOW"
    SHOP_NOW = "SHOP_NOW"
    SIGN_UP = "SIGN_UP"
    SUBSCRIBE = "SUBSCRIBE"
    WATCH_MORE = "WATCH_MORE"


class AdCreativeStatus(str, Enum):
    """Values of ``AdCreative_status``."""

    ACTIVE = "ACTIVE"
    IN_PROCESS = "IN_PROCESS"
    WITH_ISSUES = "WITH_ISSUES"
    DELETED = "DELETED"


class AdPreviewAdFormat(str, Enum):
    """Values of ``AdPreview_ad_format``."""

    AUDIENCE_NETWORK_OUTSTREAM_VIDEO = "AUDIENCE_NETWORK_OUTSTREAM_VIDEO"
    DESKTOP_FEED_STANDARD = "DESKTOP_FEED_STANDARD"
    FACEBOOK_STORY_MOBILE = "FACEBOOK_STORY_MOBILE"
    INSTAGRAM_STANDARD = "INSTAGRAM_STANDARD"
    INSTAGRAM_STORY = "INSTAGRAM_STORY"
    MARKETPLACE_MOBILE = "MARKETPLACE_MOBILE"
    MESSENGER_MOBILE_INBOX_MEDIA = "MESSENGER_MOBILE_INBOX_MEDIA"
    MOBILE_FEED_STANDARD = "MOBILE_FEED_STANDARD"
    RIGHT_COLUMN_STANDARD = "RIGHT_COLUMN_STANDARD"


class AdSetBillingEvent(str, Enum):
    """Values of ``AdSet_billing_event``."""

    APP_INSTALLS = "APP_INSTALLS"
    CLICKS = "CLICKS"
    IMPRESSIONS = "IMPRESSIONS"
    LINK_CLICKS = "LINK_CLICKS"
    LISTING_INTERACTION = "LISTING_INTERACTION"
    NONE = "NONE"
    OFFER_CLAIMS = "OFFER_CLAIMS"
    PAGE_LIKES = "PAGE_LIKES"
    POST_ENGAGEMENT = "POST_ENGAGEMENT"
    PURCHASE = "PURCHASE"
    THRUPLAY = "THRUPLAY"


class AdSetDestinationType(str, Enum):
    """Values of ``AdSet_destination_type``."""

    APP = "APP"
    APPLINKS_AUTOMATIC = "APPLINKS_AUTOMATIC"
    FACEBOOK = "FACEBOOK"
    INSTAGRAM_DIRECT = "INSTAGRAM_DIRECT"
    MESSENGER = "MESSENGER"
    ON_AD = "ON_AD"
    ON_EVENT = "ON_EVENT"
    ON_PAGE = "ON_PAGE"
    ON_POST = "ON_POST"
    ON_VIDEO = "ON_VIDEO"
    SHOP_AUTOMATIC = "SHOP_AUTOMATIC"
    WEBSITE = "WEBSITE"
    WHATSAPP = "WHATSAPP"


class AdSetOptimizationGoal(str, Enum):
    """Values of ``AdSet_optimization_goal``."""

    AD_RECALL_LIFT = "AD_RECALL_LIFT"
    APP_INSTALLS = "APP_INSTALLS"
    CONVERSATIONS = "CONVERSATIONS"
    ENGAGED_USERS = "ENGAGED_USERS"
    EVENT_RESPONSES = "EVENT_RESPONSES"
    IMPRESSIONS = "IMPRESSIONS"
    LANDING_PAGE_VIEWS = "LANDING_PAGE_VIEWS"
    LEAD_GENERATION = "LEAD_GENERATION"
    LINK_CLICKS = "LINK_CLICKS"
    NONE = "NONE"
    OFFSITE_CONVERSIONS = "OFFSITE_CONVERSIONS"
    PAGE_LIKES = "PAGE_LIKES"
    POST_ENGAGEMENT = "POST_ENGAGEMENT"
    QUALITY_CALL = "QUALITY_CALL"
    QUALITY_LEAD = "QUALITY_LEAD"
    REACH = "REACH"
    THRUPLAY = "THRUPLAY"
    VALUE = "VALUE"
    VISIT_INSTAGRAM_PROFILE = "VISIT_INSTAGRAM_PROFILE"


class AdSetStatus(str, Enum):
    """Values of ``AdSet_status``."""

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    DELETED = "DELETED"
    ARCHIVED = "ARCHIVED"


class AdVideoUnpublishedContentType(str, Enum):
    """Values of ``AdVideo_unpublished_content_type``."""

    ADS_POST = "ADS_POST"
    DRAFT = "DRAFT"
    INLINE_CREATED = "INLINE_CREATED"
    PUBLISHED = "PUBLISHED"
    REVIEWABLE_BRANDED_CONTENT = "REVIEWABLE_BRANDED_CONTENT"
    SCHEDULED = "SCHEDULED"
    SCHEDULED_RECURRING = "SCHEDULED_RECURRING"


class AdStatus(str, Enum):
    """Values of ``Ad_status``."""

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    DELETED = "DELETED"
    ARCHIVED = "ARCHIVED"


class AdsInsightsBreakdowns(str, Enum):
    """Values of ``AdsInsights_breakdowns``."""

    AGE = "age"
    COUNTRY = "country"
    DMA = "dma"
    DEVICE_PLATFORM = "device_platform"
    GENDER = "gender"
    HOURLY_STATS_AGGREGATED_BY_ADVERTISER_TIME_ZONE = "hourly_stats_aggregated_by_advertiser_time_zone"
    IMPRESSION_DEVICE = "impression_device"
    PLATFORM_POSITION = "platform_position"
    PUBLISHER_PLATFORM = "publisher_platform"
    REGION = "region"


class AdsInsightsDatePreset(str, Enum):
    """Values of ``AdsInsights_date_preset``."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    THIS_QUARTER = "this_quarter"
    MAXIMUM = "maximum"
    DATA_MAXIMUM = "data_maximum"
    LAST_3D = "last_3d"
    LAST_7D = "last_7d"
    LAST_14D = "last_14d"
    LAST_28D = "last_28d"
    LAST_30D = "last_30d"
    LAST_90D = "last_90d"
    LAST_WEEK_MON_SUN = "last_week_mon_sun"
    LAST_WEEK_SUN_SAT = "last_week_sun_sat"
    LAST_QUARTER = "last_quarter"
    LAST_YEAR = "last_year"
    THIS_WEEK_MON_TODAY = "this_week_mon_today"
    THIS_WEEK_SUN_TODAY = "this_week_sun_today"
    THIS_YEAR = "this_year"


class AdsInsightsLevel(str, Enum):
    """Values of ``AdsInsights_level``."""

    AD = "ad"
    ADSET = "adset"
    CAMPAIGN = "campaign"
    ACCOUNT = "account"


class CampaignBidStrategy(str, Enum):
    """Values of ``Campaign_bid_strategy``."""

    LOWEST_COST_WITHOUT_CAP = "LOWEST_COST_WITHOUT_CAP"
    LOWEST_COST_WITH_BID_CAP = "LOWEST_COST_WITH_BID_CAP"
    COST_CAP = "COST_CAP"
    LOWEST_COST_WITH_MIN_ROAS = "LOWEST_COST_WITH_MIN_ROAS"


class CampaignEffectiveStatus(str, Enum):
    """Values of ``Campaign_effective_status``."""

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    DELETED = "DELETED"
    PENDING_REVIEW = "PENDING_REVIEW"
    DISAPPROVED = "DISAPPROVED"
    PREAPPROVED = "PREAPPROVED"
    PENDING_BILLING_INFO = "PENDING_BILLING_INFO"
    CAMPAIGN_PAUSED = "CAMPAIGN_PAUSED"
    ARCHIVED = "ARCHIVED"
    ADSET_PAUSED = "ADSET_PAUSED"
    IN_PROCESS = "IN_PROCESS"
    WITH_ISSUES = "WITH_ISSUES"


class CampaignObjective(str, Enum):
    """Values of ``Campaign_objective``."""

    OUTCOME_APP_PROMOTION = "OUTCOME_APP_PROMOTION"
    OUTCOME_AWARENESS = "OUTCOME_AWARENESS"
    OUTCOME_ENGAGEMENT = "OUTCOME_ENGAGEMENT"
    OUTCOME_LEADS = "OUTCOME_LEADS"
    OUTCOME_SALES = "OUTCOME_SALES"
    OUTCOME_TRAFFIC = "OUTCOME_TRAFFIC"
    APP_INSTALLS = "APP_INSTALLS"
    BRAND_AWARENESS = "BRAND_AWARENESS"
    CONVERSIONS = "CONVERSIONS"
    LINK_CLICKS = "LINK_CLICKS"
    REACH = "REACH"
    VIDEO_VIEWS = "VIDEO_VIEWS"


class CampaignSpecialAdCategories(str, Enum):
    """Values of ``Campaign_special_ad_categories``."""

    NONE = "NONE"
    EMPLOYMENT = "EMPLOYMENT"
    HOUSING = "HOUSING"
    CREDIT = "CREDIT"
    ISSUES_ELECTIONS_POLITICS = "ISSUES_ELECTIONS_POLITICS"
    ONLINE_GAMBLING_AND_GAMING = "ONLINE_GAMBLING_AND_GAMING"
    FINANCIAL_PRODUCTS_SERVICES = "FINANCIAL_PRODUCTS_SERVICES"


class CampaignStatus(str, Enum):
    """Values of ``Campaign_status``."""

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    DELETED = "DELETED"
    ARCHIVED = "ARCHIVED"


class CampaignStatusOption(str, Enum):
    """Values of ``Campaign_status_option``."""

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    INHERITED_FROM_SOURCE = "INHERITED_FROM_SOURCE"


class CustomAudienceCustomerFileSource(str, Enum):
    """Values of ``CustomAudience_customer_file_source``."""

    USER_PROVIDED_ONLY = "USER_PROVIDED_ONLY"
    PARTNER_PROVIDED_ONLY = "PARTNER_PROVIDED_ONLY"
    BOTH_USER_AND_PARTNER_PROVIDED = "BOTH_USER_AND_PARTNER_PROVIDED"


class CustomAudienceSubtype(str, Enum):
    """Values of ``CustomAudience_subtype``."""

    APP = "APP"
    BAG_OF_ACCOUNTS = "BAG_OF_ACCOUNTS"
    BIDDING = "BIDDING"
    CLAIM = "CLAIM"
    CUSTOM = "CUSTOM"
    ENGAGEMENT = "ENGAGEMENT"
    LOOKALIKE = "LOOKALIKE"
    MANAGED = "MANAGED"
    MEASUREMENT = "MEASUREMENT"
    OFFLINE_CONVERSION = "OFFLINE_CONVERSION"
    PARTNER = "PARTNER"
    PRIMARY = "PRIMARY"
    REGULATED_CATEGORIES_AUDIENCE = "REGULATED_CATEGORIES_AUDIENCE"
    STUDY_RULE_AUDIENCE = "STUDY_RULE_AUDIENCE"
    VIDEO = "VIDEO"
    WEBSITE = "WEBSITE"


class HighDemandPeriodBudgetValueType(str, Enum):
    """Values of ``HighDemandPeriod_budget_value_type``."""

    ABSOLUTE = "ABSOLUTE"
    MULTIPLIER = "MULTIPLIER"


class UserbusinessesSurveyBusinessTypeEnumParam(str, Enum):
    """Values of ``userbusinesses_survey_business_type_enum_param``."""

    ADVERTISER = "ADVERTISER"
    AGENCY = "AGENCY"
    APP_DEVELOPER = "APP_DEVELOPER"
    PUBLISHER = "PUBLISHER"


class UserbusinessesVerticalEnumParam(str, Enum):
    """Values of ``userbusinesses_vertical_enum_param``."""

    ADVERTISING = "ADVERTISING"
    AUTOMOTIVE = "AUTOMOTIVE"
    CONSUMER_PACKAGED_GOODS = "CONSUMER_PACKAGED_GOODS"
    ECOMMERCE = "ECOMMERCE"
    EDUCATION = "EDUCATION"
    ENERGY_AND_UTILITIES = "ENERGY_AND_UTILITIES"
    ENTERTAINMENT_AND_MEDIA = "ENTERTAINMENT_AND_MEDIA"
    FINANCIAL_SERVICES = "FINANCIAL_SERVICES"
    GAMING = "GAMING"
    GOVERNMENT_AND_POLITICS = "GOVERNMENT_AND_POLITICS"
    HEALTH = "HEALTH"
    LUXURY = "LUXURY"
    MARKETING = "MARKETING"
    NON_PROFIT = "NON_PROFIT"
    NOT_SET = "NOT_SET"
    ORGANIZATIONS_AND_ASSOCIATIONS = "ORGANIZATIONS_AND_ASSOCIATIONS"
    OTHER = "OTHER"
    PROFESSIONAL_SERVICES = "PROFESSIONAL_SERVICES"
    RESTAURANT = "RESTAURANT"
    RETAIL = "RETAIL"
    TECHNOLOGY = "TECHNOLOGY"
    TELECOM = "TELECOM"
    TRAVEL = "TRAVEL"


__all__ = [
    "AdActivityCategory",
    "AdCreativeCallToActionType",
    "AdCreativeStatus",
    "AdPreviewAdFormat",
    "AdSetBillingEvent",
    "AdSetDestinationType",
    "AdSetOptimizationGoal",
    "AdSetStatus",
    "AdVideoUnpublishedContentType",
    "AdStatus",
    "AdsInsightsBreakdowns",
    "AdsInsightsDatePreset",
    "AdsInsightsLevel",
    "CampaignBidStrategy",
    "CampaignEffectiveStatus",
    "CampaignObjective",
    "CampaignSpecialAdCategories",
    "CampaignStatus",
    "CampaignStatusOption",
    "CustomAudienceCustomerFileSource",
    "CustomAudienceSubtype",
    "HighDemandPeriodBudgetValueType",
    "UserbusinessesSurveyBusinessTypeEnumParam",
    "UserbusinessesVerticalEnumParam",
]
