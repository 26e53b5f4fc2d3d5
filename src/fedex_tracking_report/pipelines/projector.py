# src/fedex_tracking_report/pipelines/projector.py
"""
Flatten CompleteTrackResult records into ReportRow values.

Each output field has one accessor returning Optional; `project_record`
supplies the fallback ("" or 0) when the accessor yields None.
"""
from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from fedex_tracking_report.models import CompleteTrackResult, ReportRow, TrackResult
from fedex_tracking_report.models.tracking import Dimensions, Weight

SHIP = "SHIP"
ACTUAL_DELIVERY = "ACTUAL_DELIVERY"

MS_PER_DAY = 86_400_000


def status_of(tr: TrackResult) -> Optional[str]:
    lsd = tr.latest_status_detail
    return lsd.status_by_locale if lsd is not None else None


def date_of_type(tr: TrackResult, date_type: str) -> Optional[str]:
    for entry in tr.date_and_times or ():
        if entry.type == date_type:
            return entry.date_time
    return None


def standard_transit_end(tr: TrackResult) -> Optional[str]:
    stw = tr.standard_transit_time_window
    if stw is None or stw.window is None:
        return None
    return stw.window.ends


def service_type_of(tr: TrackResult) -> Optional[str]:
    sd = tr.service_detail
    return sd.description if sd is not None else None


def first_weight(tr: TrackResult) -> Optional[Weight]:
    pkg = tr.package_details
    if pkg is None or pkg.weight_and_dimensions is None:
        return None
    weights = pkg.weight_and_dimensions.weight
    return weights[0] if weights else None


def first_dimensions(tr: TrackResult) -> Optional[Dimensions]:
    pkg = tr.package_details
    if pkg is None or pkg.weight_and_dimensions is None:
        return None
    dims = pkg.weight_and_dimensions.dimensions
    return dims[0] if dims else None


def delay_in_days(actual_delivery: str, standard_transit: str) -> float:
    """
    Signed fractional days from the end of the standard transit window to
    actual delivery (positive = late). 0.0 unless both timestamps are present
    and parseable.
    """
    if not actual_delivery or not standard_transit:
        return 0.0
    actual = pd.to_datetime(actual_delivery, utc=True, errors="coerce")
    standard = pd.to_datetime(standard_transit, utc=True, errors="coerce")
    if pd.isna(actual) or pd.isna(standard):
        return 0.0
    delta_ms = (actual - standard) / pd.Timedelta(milliseconds=1)
    return delta_ms / MS_PER_DAY


def project_record(record: CompleteTrackResult) -> ReportRow:
    tr = record.first_result
    if tr is None:
        return ReportRow(trackingNumber=record.tracking_number)

    actual = date_of_type(tr, ACTUAL_DELIVERY) or ""
    standard = standard_transit_end(tr) or ""
    weight = first_weight(tr)
    dims = first_dimensions(tr)

    return ReportRow(
        trackingNumber=record.tracking_number,
        status=status_of(tr) or "",
        shipDate=date_of_type(tr, SHIP) or "",
        standardTransitDate=standard,
        actualDeliveryDate=actual,
        delayInDays=delay_in_days(actual, standard),
        serviceType=service_type_of(tr) or "",
        weightValue=weight.value if weight else "",
        weightUnit=weight.unit if weight else "",
        dimensionLength=dims.length if dims else 0,
        dimensionWidth=dims.width if dims else 0,
        dimensionHeight=dims.height if dims else 0,
        dimensionUnit=dims.units if dims else "",
    )


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


def project_report(
    records: Mapping[str, CompleteTrackResult],
    order: Optional[Sequence[str]] = None,
) -> List[ReportRow]:
    """
    One row per tracking number.

    Without `order`, rows follow the mapping's insertion order. With `order`,
    rows follow its first occurrences; numbers the carrier returned nothing
    for still get a default row, and records not named in `order` come last.
    """
    if order is None:
        return [project_record(rec) for rec in records.values()]

    wanted = _unique(order)
    rows = [
        project_record(records[tn]) if tn in records else ReportRow(trackingNumber=tn)
        for tn in wanted
    ]
    seen = set(wanted)
    rows.extend(project_record(rec)
                for tn, rec in records.items() if tn not in seen)
    return rows
