# src/fedex_tracking_report/models/tracking.py
"""
Typed view of the FedEx Track API response.

Only the groups the report reads are modelled; anything else FedEx sends is
ignored. Groups that FedEx omits depending on shipment state are Optional.
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# FedEx derivedCode -> readable label
DELIVERY_STATUS_LABELS: dict[str, str] = {
    "DL": "Delivered",
    "IT": "In transit",
    "IN": "Initiated",
    "CA": "Cancelled",
    "SE": "Shipment exception",
    "DE": "Delivery exception",
    "DY": "Delay",
}


class _FedExModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class LatestStatusDetail(_FedExModel):
    code: str
    derived_code: Optional[str] = Field(None, alias="derivedCode")
    status_by_locale: str = Field(alias="statusByLocale")
    description: str


class DateAndTime(_FedExModel):
    type: str
    date_time: str = Field(alias="dateTime")


class ScanEvent(_FedExModel):
    date: str
    event_type: str = Field(alias="eventType")
    derived_status_code: Optional[str] = Field(None, alias="derivedStatusCode")
    event_description: Optional[str] = Field(None, alias="eventDescription")


class TransitWindow(_FedExModel):
    begins: Optional[str] = None
    ends: Optional[str] = None


class StandardTransitTimeWindow(_FedExModel):
    window: Optional[TransitWindow] = None


class ServiceDetail(_FedExModel):
    type: Optional[str] = None
    description: Optional[str] = None
    short_description: Optional[str] = Field(None, alias="shortDescription")


class Weight(_FedExModel):
    # FedEx sends the value as a string ("2.0") on most accounts
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    value: str
    unit: str


class Dimensions(_FedExModel):
    length: Union[int, float]
    width: Union[int, float]
    height: Union[int, float]
    units: str


class WeightAndDimensions(_FedExModel):
    weight: List[Weight] = Field(default_factory=list)
    dimensions: List[Dimensions] = Field(default_factory=list)


class PackageDetails(_FedExModel):
    weight_and_dimensions: Optional[WeightAndDimensions] = Field(
        None, alias="weightAndDimensions")


class TrackError(_FedExModel):
    code: str
    message: Optional[str] = None


class TrackResult(_FedExModel):
    latest_status_detail: Optional[LatestStatusDetail] = Field(
        None, alias="latestStatusDetail")
    date_and_times: Optional[List[DateAndTime]] = Field(
        None, alias="dateAndTimes")
    scan_events: List[ScanEvent] = Field(
        default_factory=list, alias="scanEvents")
    standard_transit_time_window: Optional[StandardTransitTimeWindow] = Field(
        None, alias="standardTransitTimeWindow")
    service_detail: Optional[ServiceDetail] = Field(
        None, alias="serviceDetail")
    package_details: Optional[PackageDetails] = Field(
        None, alias="packageDetails")
    error: Optional[TrackError] = None


class CompleteTrackResult(_FedExModel):
    """One tracking number and the carrier's results for it."""

    tracking_number: str = Field(alias="trackingNumber")
    track_results: List[TrackResult] = Field(alias="trackResults")

    @property
    def first_result(self) -> Optional[TrackResult]:
        return self.track_results[0] if self.track_results else None
