"""Benchmark: scalar vs numpy vs torch jump hash, plus remap/load diagnostics."""

import argparse
import json
from pathlib import Path

import torch

from jumphash import JumpHasher, jump_hash, jump_hash_array, jump_hash_tensor
from jumphash.hashing import expected_remap_fraction, load_summary, remap_fraction, sample_keys
from jumphash.hashing.vectorized import to_int64
from jumphash.utils import Timer, get_logger


def benchmark_paths(N, slots, device="cpu", num_trials=5, seed=42):
    """Time each bucket assignment path over the same N keys."""
    keys = sample_keys(N, seed=seed)
    key_list = [int(k) for k in keys]
    key_tensor = torch.tensor([to_int64(k) for k in key_list], dtype=torch.int64, device=device)

    scalar = Timer("scalar")
    vec_np = Timer("numpy")
    vec_torch = Timer("torch", device=device)
    for _ in range(num_trials):
        with scalar.lap():
            for k in key_list:
                jump_hash(k, slots)
        with vec_np.lap():
            jump_hash_array(keys, slots)
        with vec_torch.lap():
            jump_hash_tensor(key_tensor, slots)

    # Adapter path hashes string keys end to end
    str_keys = [f"user:{i}" for i in range(min(N, 10000))]
    adapter = Timer("adapter_siphash13")
    with adapter.lap():
        for s in str_keys:
            JumpHasher(slots).update_value(s).finalize()

    return {
        "scalar": scalar.summary(N),
        "numpy": vec_np.summary(N),
        "torch": vec_torch.summary(N),
        "adapter_siphash13": adapter.summary(len(str_keys)),
    }


def diagnostics(N, slots, seed=42):
    """Load balance at `slots` and remap fraction for slots -> slots+1."""
    keys = sample_keys(N, seed=seed)
    return {
        "load": load_summary(jump_hash_array(keys, slots), slots),
        "remap": {
            "from": slots,
            "to": slots + 1,
            "observed": remap_fraction(keys, slots, slots + 1),
            "expected": expected_remap_fraction(slots, slots + 1),
        },
    }


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Jump hash benchmark")
    parser.add_argument("--out", type=Path, default=Path("results/benchmarks/jump.json"))
    parser.add_argument("--device", type=str, default="cpu", choices=["cpu", "cuda"])
    parser.add_argument("--N", type=int, default=100000)
    parser.add_argument("--slots", type=int, default=1000)
    parser.add_argument("--trials", type=int, default=5)
    parser.add_argument("--seed", type=int, default=42)

    args = parser.parse_args()

    logger = get_logger("jump_bench", log_file=args.out.parent / "log.txt")

    results = benchmark_paths(
        args.N, args.slots, device=args.device, num_trials=args.trials, seed=args.seed
    )
    for name, res in results.items():
        logger.info(f"{name}: {res['throughput']:.0f} keys/s")

    diag = diagnostics(args.N, args.slots, seed=args.seed)
    logger.info(
        f"remap {args.slots}->{args.slots + 1}: "
        f"observed={diag['remap']['observed']:.5f} expected={diag['remap']['expected']:.5f}"
    )

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with open(args.out, "w") as f:
        json.dump({"paths": results, "diagnostics": diag}, f, indent=2)

    logger.info(f"Results saved to {args.out}")
