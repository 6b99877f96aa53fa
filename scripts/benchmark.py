#!/usr/bin/env python3
"""Benchmark embedding creation and cosine similarity.

For each embedding size, times N constructions from a random Python list and
N cosine similarities between freshly built embeddings.
"""

import sys
import time
import argparse

import numpy as np
from tqdm import tqdm

from rag_embeddings.embedding import create
from rag_embeddings.utils.config import DEFAULT_CONFIG_PATH, load_config
from rag_embeddings.utils.logger import setup_logging, get_logger


DEFAULT_SIZES = [768, 2048, 3072, 4096]


def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Embedding performance benchmark")
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to the YAML configuration (default: {DEFAULT_CONFIG_PATH})"
    )
    parser.add_argument(
        "-n",
        type=int,
        default=10_000,
        help="Number of operations per measurement (default: 10000)"
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=DEFAULT_SIZES,
        help="Embedding sizes to benchmark (default: 768 2048 3072 4096)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)"
    )
    return parser.parse_args()


def run_size(size, n, policy, dtype, rng):
    """Time creation and cosine similarity for one embedding size.

    Returns:
        (creation_ms, similarity_ms)
    """
    values_a = rng.random(size).tolist()
    values_b = rng.random(size).tolist()

    start = time.perf_counter()
    for _ in range(n):
        create(values_a, policy=policy, dtype=dtype)
    creation_ms = (time.perf_counter() - start) * 1000

    embeddings = [create(values_a, policy=policy, dtype=dtype) for _ in range(n)]
    start = time.perf_counter()
    for emb in embeddings:
        other = create(values_b, policy=policy, dtype=dtype)
        emb.cosine_similarity(other)
    similarity_ms = (time.perf_counter() - start) * 1000

    return creation_ms, similarity_ms


def main():
    """Main entry point for the benchmark."""
    args = parse_arguments()

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"ERROR: Failed to load configuration: {e}")
        sys.exit(1)

    setup_logging(
        log_level=config.logging.level,
        log_dir=config.logging.log_dir,
        log_format=config.logging.format,
        file_prefix="benchmark"
    )
    logger = get_logger(__name__)

    policy = config.embedding.get('policy', 'strict')
    dtype = config.embedding.get('dtype', 'float32')
    logger.info(f"Benchmarking policy={policy}, dtype={dtype}, n={args.n}")

    rng = np.random.default_rng(args.seed)
    results = []
    for size in tqdm(args.sizes, desc="Embedding sizes", unit="size"):
        creation_ms, similarity_ms = run_size(size, args.n, policy, dtype, rng)
        results.append((size, creation_ms, similarity_ms))

    logger.info("=" * 70)
    for size, creation_ms, similarity_ms in results:
        logger.info(f"Embedding size: {size}")
        logger.info(f"  Embedding creation ({args.n} times): {creation_ms:.0f} ms")
        logger.info(f"  Cosine similarity ({args.n} times): {similarity_ms:.0f} ms")
    logger.info("=" * 70)


if __name__ == "__main__":
    main()
