"""Generate sample input files for testing housing analytics."""

import json
import random
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

VIOLATION_TYPES = [
    "METER EXPIRED",
    "METER EXPIRED CC",
    "DOUBLE PARKED",
    "BUS ONLY ZONE",
    "FIRE HYDRANT",
    "STOP PROHIBITED CC"
]


def generate_property_data(
    zip_codes: Optional[List[int]] = None,
    properties_per_zip: int = 50,
    seed: int = 42
) -> pd.DataFrame:
    """
    Generate sample property rows in the properties CSV layout.
    
    Parameters
    ----------
    zip_codes : list of int, optional
        ZIP codes to populate (default: a handful of Philadelphia ZIPs)
    properties_per_zip : int
        Rows per ZIP code
    seed : int
        Random seed for reproducibility
        
    Returns
    -------
    pd.DataFrame
        Columns include zip_code (sometimes ZIP+4), market_value,
        total_livable_area and unrelated columns
    """
    rng = np.random.default_rng(seed)
    zip_codes = zip_codes or [19103, 19104, 19106, 19143, 19147]
    
    rows = []
    for zip_idx, zip_code in enumerate(zip_codes):
        base_value = 150000 + zip_idx * 40000
        for i in range(properties_per_zip):
            zip_text = str(zip_code) if i % 3 else f"{zip_code}-{rng.integers(1000, 9999)}"
            rows.append({
                "objectid": len(rows) + 1,
                "location": f"{i + 1} MARKET ST",
                "zip_code": zip_text,
                "market_value": int(base_value + rng.integers(-50000, 50000)),
                "total_livable_area": int(800 + rng.integers(0, 2400)),
                "year_built": int(rng.integers(1900, 2020))
            })
    
    return pd.DataFrame(rows)


def generate_population_data(zip_codes: List[int], seed: int = 42) -> Dict[int, int]:
    """Random population per ZIP code."""
    random.seed(seed)
    return {zip_code: random.randint(5000, 60000) for zip_code in zip_codes}


def generate_violation_data(
    zip_codes: List[int],
    n_violations: int = 200,
    seed: int = 42
) -> pd.DataFrame:
    """Random parking tickets in the violations CSV column order."""
    random.seed(seed)
    
    rows = []
    for i in range(n_violations):
        rows.append({
            "date": f"2024-{random.randint(1, 12):02d}-{random.randint(1, 28):02d}T10:00:00Z",
            "fine": random.choice([26, 36, 41, 51, 76, 101]),
            "violation": random.choice(VIOLATION_TYPES),
            "plate_id": str(1000000 + i),
            "state": random.choice(["PA", "PA", "PA", "NJ", "DE"]),
            "ticket_number": str(2000000 + i),
            "zip_code": random.choice(zip_codes + [None])
        })
    
    return pd.DataFrame(rows)


def write_sample_files(output_dir: Path, seed: int = 42) -> Dict[str, Path]:
    """
    Write a complete set of input files.
    
    Returns
    -------
    dict
        Paths keyed by "properties", "population", "violations_csv" and
        "violations_json"
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    
    properties = generate_property_data(seed=seed)
    zip_codes = sorted({int(str(z)[:5]) for z in properties["zip_code"]})
    populations = generate_population_data(zip_codes, seed=seed)
    violations = generate_violation_data(zip_codes, seed=seed)
    
    paths = {
        "properties": output_dir / "properties.csv",
        "population": output_dir / "population.txt",
        "violations_csv": output_dir / "parking.csv",
        "violations_json": output_dir / "parking.json"
    }
    
    properties.to_csv(paths["properties"], index=False)
    
    with open(paths["population"], "w") as f:
        for zip_code, population in populations.items():
            f.write(f"{zip_code} {population}\n")
    
    csv_rows = violations.astype(object).where(violations.notna(), "")
    csv_rows["zip_code"] = [
        "" if zip_code == "" else str(int(zip_code)) for zip_code in csv_rows["zip_code"]
    ]
    csv_rows.to_csv(paths["violations_csv"], index=False, header=False)
    
    records = [
        {**row, "zip_code": None if pd.isna(row["zip_code"]) else int(row["zip_code"])}
        for row in violations.to_dict(orient="records")
    ]
    with open(paths["violations_json"], "w") as f:
        json.dump(records, f)
    
    return paths


if __name__ == "__main__":
    output = Path("tests/fixtures/data")
    for name, path in write_sample_files(output).items():
        print(f"Wrote {name}: {path}")
