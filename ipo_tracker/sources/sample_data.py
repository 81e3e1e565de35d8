"""Sample Record Source payloads.

There is no free comprehensive feed for upcoming IPOs or angel rounds, so
the API serves these curated rows. They are kept in the raw camelCase
payload shape so they go through the same parsing path as any upstream.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List


_SAMPLE_IPOS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "TechFlow Solutions",
        "sector": "Tech",
        "targetValuation": 2.8,
        "filingDate": "2025-06-15",
        "expectedDebutDate": "2025-07-20",
        "roadshowStatus": "In Progress",
        "fundingRaised": 650,
        "lastValuation": 2.1,
        "growth": 125,
        "risk": "Medium",
        "stage": "Roadshow",
        "website": "https://techflow.com",
        "symbol": "TFLW",
        "exchange": "NASDAQ",
        "revenueGrowth": [
            {"year": "2022", "value": 95},
            {"year": "2023", "value": 142},
            {"year": "2024", "value": 238},
        ],
        "keyMetrics": {
            "cac": "$380",
            "ltv": "$1,890",
            "margins": "71%",
            "burnRate": "$3.2M/month",
        },
        "news": [
            {
                "date": "2025-05-28",
                "title": "TechFlow announces IPO roadshow schedule",
                "url": "https://techcrunch.com/techflow-ipo",
            },
            {
                "date": "2025-05-15",
                "title": "Company reports record Q1 revenue growth",
                "url": "https://finance.yahoo.com/techflow-earnings",
            },
        ],
    },
    {
        "id": 2,
        "name": "HealthAI Diagnostics",
        "sector": "Health Tech",
        "targetValuation": 4.1,
        "filingDate": "2025-07-01",
        "expectedDebutDate": "2025-08-15",
        "roadshowStatus": "Preparing",
        "fundingRaised": 890,
        "lastValuation": 3.2,
        "growth": 156,
        "risk": "Medium-High",
        "stage": "Filed",
        "website": "https://healthai.com",
        "symbol": "HLAI",
        "exchange": "NYSE",
        "revenueGrowth": [
            {"year": "2022", "value": 45},
            {"year": "2023", "value": 89},
            {"year": "2024", "value": 187},
        ],
        "keyMetrics": {
            "cac": "$2,100",
            "ltv": "$8,500",
            "margins": "78%",
            "burnRate": "$5.8M/month",
        },
        "news": [
            {
                "date": "2025-05-25",
                "title": "HealthAI receives FDA approval for new diagnostic tool",
                "url": "https://medcitynews.com/healthai-fda",
            },
            {
                "date": "2025-05-10",
                "title": "Files S-1 for anticipated public offering",
                "url": "https://sec.gov/healthai-s1",
            },
        ],
    },
]


_SAMPLE_ANGELS: List[Dict[str, Any]] = [
    {
        "id": 101,
        "name": "QuantumFlow AI",
        "sector": "AI/Quantum",
        "stage": "Series A",
        "targetRaise": 35,
        "valuation": 180,
        "growth": 245,
        "risk": "High",
        "website": "https://quantumflow.ai",
        "revenueGrowth": [
            {"year": "2023", "value": 1.2},
            {"year": "2024", "value": 4.1},
        ],
        "keyMetrics": {
            "cac": "$8,200",
            "ltv": "$95,000",
            "margins": "89%",
            "burnRate": "$1.2M/month",
        },
        "traction": "Partnerships with Microsoft and IBM, 15 enterprise clients",
        "team": "Founded by ex-DeepMind researchers with 3 Nature publications",
        "investors": "Andreessen Horowitz, Google Ventures, Founders Fund",
        "news": [
            {
                "date": "2025-05-20",
                "title": "Raises $35M Series A led by a16z",
                "url": "https://techcrunch.com/quantumflow-series-a",
            },
            {
                "date": "2025-04-28",
                "title": "Announces quantum computing breakthrough",
                "url": "https://venturebeat.com/quantumflow-breakthrough",
            },
        ],
    },
    {
        "id": 102,
        "name": "RegenTherapy Bio",
        "sector": "BioTech",
        "stage": "Series B",
        "targetRaise": 85,
        "valuation": 420,
        "growth": 189,
        "risk": "Very High",
        "website": "https://regentherapy.bio",
        "revenueGrowth": [
            {"year": "2023", "value": 0.8},
            {"year": "2024", "value": 2.3},
        ],
        "keyMetrics": {
            "cac": "Pre-commercial",
            "ltv": "Est. $250K/patient",
            "margins": "Projected 82%",
            "burnRate": "$2.8M/month",
        },
        "traction": "Phase 2 trials showing 78% efficacy, FDA fast-track designation",
        "team": "Founded by Harvard Medical School faculty, 20+ patents",
        "investors": "Johnson & Johnson Innovation, Roche Ventures, OrbiMed",
        "news": [
            {
                "date": "2025-05-18",
                "title": "Positive Phase 2 trial results announced",
                "url": "https://fiercebiotech.com/regentherapy-phase2",
            },
            {
                "date": "2025-04-30",
                "title": "Opens Series B funding round",
                "url": "https://bioworld.com/regentherapy-series-b",
            },
        ],
    },
    {
        "id": 103,
        "name": "CarbonZero Systems",
        "sector": "CleanTech",
        "stage": "Seed+",
        "targetRaise": 18,
        "valuation": 75,
        "growth": 134,
        "risk": "Medium-High",
        "website": "https://carbonzero.systems",
        "revenueGrowth": [
            {"year": "2023", "value": 0.3},
            {"year": "2024", "value": 0.7},
        ],
        "keyMetrics": {
            "cac": "$15,000",
            "ltv": "$180,000",
            "margins": "65%",
            "burnRate": "$850K/month",
        },
        "traction": "Pilots with 8 Fortune 500 companies, $2.1M in signed contracts",
        "team": "MIT alumni with expertise in atmospheric engineering",
        "investors": "Breakthrough Energy Ventures, Kleiner Perkins, Climate Capital",
        "news": [
            {
                "date": "2025-05-22",
                "title": "Signs major contract with tech giant for carbon capture",
                "url": "https://greentechmedia.com/carbonzero-contract",
            },
            {
                "date": "2025-05-05",
                "title": "Demonstrates 95% CO2 capture efficiency",
                "url": "https://cleantechnica.com/carbonzero-efficiency",
            },
        ],
    },
    {
        "id": 104,
        "name": "NeuroLink Therapeutics",
        "sector": "MedTech",
        "stage": "Series A",
        "targetRaise": 42,
        "valuation": 210,
        "growth": 167,
        "risk": "High",
        "website": "https://neurolink-tx.com",
        "revenueGrowth": [
            {"year": "2023", "value": 0.5},
            {"year": "2024", "value": 1.3},
        ],
        "keyMetrics": {
            "cac": "$25,000",
            "ltv": "$320,000",
            "margins": "74%",
            "burnRate": "$1.8M/month",
        },
        "traction": "FDA breakthrough device designation, 3 successful implants",
        "team": "Neurosurgeons from Johns Hopkins and Stanford",
        "investors": "GV (Google Ventures), Khosla Ventures, Data Collective",
        "news": [
            {
                "date": "2025-05-15",
                "title": "FDA grants breakthrough device status",
                "url": "https://meddeviceonline.com/neurolink-fda",
            },
            {
                "date": "2025-04-20",
                "title": "Successful first human trial results",
                "url": "https://neurosciencenews.com/neurolink-trial",
            },
        ],
    },
]


def sample_ipo_payload() -> List[Dict[str, Any]]:
    """Upcoming-IPO rows as served by GET /api/ipo-calendar (fresh copy per call)."""
    return copy.deepcopy(_SAMPLE_IPOS)


def sample_angel_payload() -> List[Dict[str, Any]]:
    """Angel-investment rows as served by GET /api/angel-investments (fresh copy per call)."""
    return copy.deepcopy(_SAMPLE_ANGELS)
