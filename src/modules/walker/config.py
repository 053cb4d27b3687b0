from enum import Enum
from pydantic import BaseModel


class ListenerErrorPolicy(str, Enum):
    ISOLATE = "isolate"  # log, report as listener_error, keep walking
    RAISE = "raise"      # propagate the listener's exception to the caller


class WalkerConfig(BaseModel):
    listener_errors: ListenerErrorPolicy = ListenerErrorPolicy.ISOLATE
    dry_run: bool = False  # report every step without invoking it or running hooks
    strict: bool = False   # undefined and pending steps count as failures
