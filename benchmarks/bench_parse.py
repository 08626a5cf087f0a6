#!/usr/bin/env python3
"""
Benchmark script timing molform formula parsing against RDKit.

RDKit has no parser for condensed formulas, so its side of the comparison
is CalcMolFormula on an already parsed molecule of the same compound:
the cost of getting element counts out of a structure it already holds.

Usage:
    python benchmarks/bench_parse.py [--extended]

Options:
    --extended    Run every test formula, not just the largest one
"""

import sys
import os
import time
from dataclasses import dataclass
from typing import Optional

# Ensure local molform is used (not installed version)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# name -> (condensed formula, equivalent SMILES)
TEST_FORMULAS = {
    "water": ("H2O", "O"),
    "acetic_acid": ("CH3COOH", "CC(=O)O"),
    "glycerol": ("HOCH2CH(OH)CH2OH", "OCC(O)CO"),
    "stearic_acid": ("CH3(CH2)16COOH", "CCCCCCCCCCCCCCCCCC(=O)O"),
    "fremys_salt": ("K4[ON(SO3)2]2", "[K+].[K+].[K+].[K+].[O]N(S(=O)(=O)[O-])S(=O)(=O)[O-].[O]N(S(=O)(=O)[O-])S(=O)(=O)[O-]"),
    "nested": ("[(CH3)3C(CH2)2]2NCH2CH3", "CCN(CCC(C)(C)C)CCC(C)(C)C"),
}

LARGEST = "nested"

ITERATIONS = 10000
EXTENDED_ITERATIONS = 5000


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    formula: str
    time_seconds: float
    iterations: int
    num_elements: int

    @property
    def time_per_call_us(self) -> float:
        return (self.time_seconds / self.iterations) * 1_000_000


def benchmark_rdkit(smiles: str, iterations: int) -> BenchmarkResult:
    """Benchmark RDKit CalcMolFormula on a parsed molecule."""
    from rdkit import Chem
    from rdkit.Chem import rdMolDescriptors

    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit failed to parse SMILES: {smiles}")

    # Warmup
    formula = rdMolDescriptors.CalcMolFormula(mol)

    start = time.perf_counter()
    for _ in range(iterations):
        formula = rdMolDescriptors.CalcMolFormula(mol)
    end = time.perf_counter()

    return BenchmarkResult(
        formula=formula,
        time_seconds=end - start,
        iterations=iterations,
        num_elements=sum(1 for c in formula if c.isupper()),
    )


def benchmark_molform(formula: str, iterations: int) -> BenchmarkResult:
    """Benchmark molform parse_molecule."""
    from molform import parse_molecule

    # Warmup
    mol = parse_molecule(formula)

    start = time.perf_counter()
    for _ in range(iterations):
        mol = parse_molecule(formula)
    end = time.perf_counter()

    return BenchmarkResult(
        formula=formula,
        time_seconds=end - start,
        iterations=iterations,
        num_elements=len(mol),
    )


def _run(name: str, iterations: int) -> tuple[Optional[BenchmarkResult], Optional[BenchmarkResult]]:
    formula, smiles = TEST_FORMULAS[name]
    rdkit_result: Optional[BenchmarkResult] = None
    molform_result: Optional[BenchmarkResult] = None

    try:
        rdkit_result = benchmark_rdkit(smiles, iterations)
    except ImportError:
        print(f"  [{name}] RDKit SKIPPED (rdkit not installed)")

    molform_result = benchmark_molform(formula, iterations)
    return rdkit_result, molform_result


def run_single_benchmark():
    """Run the largest formula only."""
    formula, _ = TEST_FORMULAS[LARGEST]
    print("=" * 70)
    print("Formula Benchmark: RDKit vs molform")
    print("=" * 70)
    print(f"\nTest formula: {formula}")
    print(f"Iterations: {ITERATIONS}")
    print("-" * 70)

    rdkit_result, molform_result = _run(LARGEST, ITERATIONS)
    if rdkit_result:
        print(f"RDKit:   {rdkit_result.time_per_call_us:.2f} µs/call -> {rdkit_result.formula}")
    print(f"molform: {molform_result.time_per_call_us:.2f} µs/call")

    if rdkit_result:
        ratio = molform_result.time_seconds / rdkit_result.time_seconds
        if ratio < 1:
            print(f"\nmolform is {1/ratio:.2f}x FASTER than RDKit")
        else:
            print(f"\nmolform is {ratio:.2f}x SLOWER than RDKit")


def run_extended_benchmark():
    """Run every test formula and print a table."""
    print("=" * 70)
    print("EXTENDED Formula Benchmark: RDKit vs molform")
    print("=" * 70)
    print(f"\nIterations per formula: {EXTENDED_ITERATIONS}")

    header = f"{'Formula':<16} {'Elements':>8} {'RDKit µs':>10} {'molform µs':>11} {'Ratio':>8}"
    print(header)
    print("-" * 70)

    for name in TEST_FORMULAS:
        rdkit_res, molform_res = _run(name, EXTENDED_ITERATIONS)
        rdkit_str = f"{rdkit_res.time_per_call_us:.2f}" if rdkit_res else "N/A"
        ratio_str = (
            f"{molform_res.time_seconds / rdkit_res.time_seconds:.2f}x" if rdkit_res else "N/A"
        )
        print(f"{name:<16} "
              f"{molform_res.num_elements:>8} "
              f"{rdkit_str:>10} "
              f"{molform_res.time_per_call_us:>11.2f} "
              f"{ratio_str:>8}")


def main():
    if "--extended" in sys.argv or "-e" in sys.argv:
        run_extended_benchmark()
    else:
        run_single_benchmark()
        print("\n" + "-" * 70)
        print("TIP: Run with --extended for all test formulas")


if __name__ == "__main__":
    main()
