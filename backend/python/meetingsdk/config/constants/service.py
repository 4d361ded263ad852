from enum import Enum


class config_node_constants(Enum):
    """Constants for configuration store paths"""

    MEETING = "/services/connectors/meeting/config"


class MeetingDefaults(Enum):
    """Connection defaults for the meeting service"""

    BASE_URL = "https://api.meeting.huaweicloud.com"
    TIMEOUT = 30.0
