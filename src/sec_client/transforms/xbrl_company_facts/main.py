"""Transform SEC XBRL Company Facts into one row per reported value."""

import pyarrow as pa
from .test import test

DATASET_ID = "edgar_xbrl_facts"

SCHEMA = pa.schema([
    pa.field("cik", pa.string(), nullable=False),
    pa.field("entity_name", pa.string(), nullable=False),
    pa.field("taxonomy", pa.string(), nullable=False),
    pa.field("concept", pa.string(), nullable=False),
    pa.field("label", pa.string()),
    pa.field("unit", pa.string(), nullable=False),
    pa.field("value", pa.string()),
    pa.field("end_date", pa.string(), nullable=False),
    pa.field("fiscal_year", pa.int32()),
    pa.field("fiscal_period", pa.string()),
    pa.field("form", pa.string(), nullable=False),
    pa.field("filed", pa.string(), nullable=False),
    pa.field("accession", pa.string(), nullable=False),
], metadata={
    "dataset_id": DATASET_ID,
    "title": "SEC EDGAR XBRL Financial Facts",
    "description": "Financial metrics a company reported in XBRL, by taxonomy, concept and unit.",
})


def transform(company_facts) -> pa.Table:
    """Flatten a ``CompanyFacts`` payload.

    Values are kept as text since a concept may report numbers, text or
    booleans. Facts without a filing date or period end are skipped.
    """
    cik = str(company_facts.cik).zfill(10)

    records = []
    for taxonomy, concept, unit, fact in company_facts.records():
        if not fact.filed or not fact.end:
            continue

        label = company_facts.facts[taxonomy][concept].label
        records.append({
            "cik": cik,
            "entity_name": company_facts.entity_name,
            "taxonomy": taxonomy,
            "concept": concept,
            "label": label,
            "unit": unit,
            "value": str(fact.val) if fact.val is not None else None,
            "end_date": fact.end,
            "fiscal_year": fact.fy,
            "fiscal_period": fact.fp,
            "form": fact.form,
            "filed": fact.filed,
            "accession": fact.accn,
        })

    table = pa.Table.from_pylist(records, schema=SCHEMA)

    test(table)

    return table
