"""
KPI summary schema definition.

These TypedDicts describe the single document produced per uploaded workbook
and handed whole to the presentation layer (dashboard charts, JSON download,
Excel export). Keys are camelCase because the document is a JSON contract
shared with chart consumers, which read fields by fixed path.

Region and jurisdiction keys are the cell values as text (or "Unspecified"),
so every mapping stays valid JSON.
"""

from __future__ import annotations

from typing import Any, Dict, List, TypedDict

Row = Dict[str, Any]


class SummaryMeta(TypedDict):
    mappingSheetName: str
    regulationsSheetName: str


class PaymentTerms(TypedDict):
    avgDaysGlobal: float
    distribution: Dict[str, int]
    avgByRegion: Dict[str, float]


class Contracts(TypedDict):
    activeCount: int
    noContractCount: int


class RankedSupplier(TypedDict):
    name: Any
    spend: float


class Recyclability(TypedDict):
    globalAvg: float
    dataCount: int


class RecycledContent(TypedDict):
    globalAvg: float
    distribution: Dict[str, int]


class FSCCertification(TypedDict):
    percentGlobal: float
    percentByRegion: Dict[str, float]


class RegulationEntry(TypedDict):
    type: Any
    status: Any


class KPISummary(TypedDict):
    meta: SummaryMeta
    warnings: List[str]
    totalSuppliers: int
    suppliersByRegion: Dict[str, int]
    paymentTerms: PaymentTerms
    contracts: Contracts
    # {"global2023": [...], "global2024": [...], "byRegion": {region: {"2023": [...]}}}
    topSuppliers: Dict[str, Any]
    recyclability: Recyclability
    recycledContent: RecycledContent
    fscCertification: FSCCertification
    regulations: Dict[str, List[RegulationEntry]]
