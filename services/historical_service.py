"""
Historical Data Service
Past disaster records and the 2013 Kedarnath retrospective
"""

import datetime
from typing import Iterable, List, Optional

import pandas as pd
import structlog

from models.base import RiskLevel
from models.historical_models import (
    ActualOutcome,
    DisasterTypeSummary,
    HistoricalDisaster,
    HistoricalSummary,
    PreventionAnalysis,
    PreventionScenario,
)
from models.model import CurrentConditions, Location

logger = structlog.get_logger()

HISTORICAL_DISASTERS: List[HistoricalDisaster] = [
    HistoricalDisaster(date=datetime.date(2013, 6, 16), type="flood", severity="critical", casualties=5700, location="Kedarnath"),
    HistoricalDisaster(date=datetime.date(2016, 9, 18), type="landslide", severity="high", casualties=47, location="Chamoli"),
    HistoricalDisaster(date=datetime.date(2021, 2, 7), type="avalanche", severity="critical", casualties=204, location="Chamoli"),
    HistoricalDisaster(date=datetime.date(2022, 10, 19), type="landslide", severity="medium", casualties=12, location="Uttarkashi"),
]

# Conditions recorded on 16 June 2013
KEDARNATH_2013_CONDITIONS = CurrentConditions(
    rainfall=385,       # mm in 48 hours
    temperature=8,      # sudden drop
    pressure=995,
    humidity=98,
    wind_speed=65,
    cloud_cover=100,
    river_level=95,
)

# Includes pilgrims present at the time
KEDARNATH_2013_LOCATION = Location(
    name="Kedarnath",
    lat=30.7346,
    lng=79.0669,
    elevation=3583,
    population=100000,
    risk_level=RiskLevel.CRITICAL,
)

KEDARNATH_2013_OUTCOME = ActualOutcome(
    casualties=5700,
    missing_persons=5000,
    economic_damage=12000,
    affected_people=110000,
    damaged_infrastructure=4200,
)

KEDARNATH_2013_PREVENTION = PreventionScenario(
    early_warning_hours=8,
    evacuation_efficiency=85,
    predicted_casualties=500,
    predicted_damage=3500,
    lives_could_be_saved=5200,
    damage_reduction=8500,
)


class HistoricalDataService:
    """Service for historical disaster records and retrospective analysis"""

    def __init__(self, engine, disasters: Optional[Iterable[HistoricalDisaster]] = None):
        self.engine = engine
        self.disasters = list(HISTORICAL_DISASTERS if disasters is None else disasters)

    def list_disasters(self, disaster_type: Optional[str] = None) -> List[HistoricalDisaster]:
        records = sorted(self.disasters, key=lambda d: d.date)
        if disaster_type:
            records = [d for d in records if d.type == disaster_type.lower()]
        return records

    def summarize(self) -> HistoricalSummary:
        """Event counts and casualties per disaster type and location"""
        if not self.disasters:
            return HistoricalSummary(total_events=0, total_casualties=0, by_type=[])

        df = pd.DataFrame([d.model_dump() for d in self.disasters])

        by_type = (
            df.groupby("type")
            .agg(events=("type", "size"), casualties=("casualties", "sum"))
            .reset_index()
            .sort_values(["casualties", "type"], ascending=[False, True])
        )
        by_location = df["location"].value_counts()

        return HistoricalSummary(
            total_events=len(df),
            total_casualties=int(df["casualties"].sum()),
            by_type=[
                DisasterTypeSummary(type=row.type, events=int(row.events), casualties=int(row.casualties))
                for row in by_type.itertuples(index=False)
            ],
            by_location={name: int(count) for name, count in by_location.items()},
        )

    def analyze_kedarnath_2013(self) -> PreventionAnalysis:
        """
        Run today's engine on the 2013 Kedarnath conditions.

        The result is scored but not stored, so the live Kedarnath entry is
        left untouched.
        """
        logger.info("Analyzing 2013 Kedarnath event with current agents")

        if self.engine.is_loaded:
            prediction = self.engine.score(KEDARNATH_2013_LOCATION, KEDARNATH_2013_CONDITIONS)
        else:
            prediction = self.engine.get_default_prediction(KEDARNATH_2013_LOCATION)

        logger.info(
            "Kedarnath 2013 analysis complete",
            overall_risk=prediction.predictions.ensemble.overall_risk,
            alerts=len(prediction.alerts),
        )
        return PreventionAnalysis(
            ai_prediction=prediction,
            actual_outcome=KEDARNATH_2013_OUTCOME,
            prevention_scenario=KEDARNATH_2013_PREVENTION,
        )
