import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Set

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TEST_CASES = [
    {
        "name": "Headphones listicle",
        "title": "Best Noise Cancelling Headphones of the Year",
        "html": """
<h2>1. Sony WH-1000XM5 - Full Review</h2>
<p>The <strong>Sony WH-1000XM5</strong> is still the benchmark, priced at $399.99 with a 4.7/5 rating.</p>
<h2>2. Bose QuietComfort Ultra</h2>
<p>Bose QuietComfort Ultra offers the most comfortable fit we tested.</p>
<h2>3. AirPods Max</h2>
<p>If you live in the Apple ecosystem, AirPods Max are the obvious pick.</p>
<p><a href="https://www.amazon.com/dp/B0BXYCS74H">Sennheiser Momentum 4</a> rounds out the list.</p>
""",
        "expected": {"sony wh-1000xm5", "bose quietcomfort ultra", "airpods max", "sennheiser momentum 4"},
    },
    {
        "name": "Running watch comparison",
        "title": "Garmin vs Coros: Which Running Watch?",
        "html": """
<h2>Garmin Forerunner 265 vs Coros Pace 3</h2>
<p>The Garmin Forerunner 265 features an AMOLED display, while the Coros Pace 3 offers longer battery life.</p>
<p>Both watches track heart rate, but the <b>Forerunner 265</b> has richer training metrics.</p>
""",
        "expected": {"garmin forerunner 265", "coros pace 3"},
    },
    {
        "name": "No products",
        "title": "Why sleep matters",
        "html": """
<p>getting enough sleep helps recovery and focus.</p>
<p>most adults need seven to nine hours every night.</p>
""",
        "expected": set(),
    },
]


@dataclass
class BenchmarkResult:
    names: Set[str]
    method: str


async def detect_pattern_only(title: str, html: str) -> BenchmarkResult:
    from services.product_detection import ProductDetectionPipeline

    pipeline = ProductDetectionPipeline()
    detection = await pipeline.detect_candidates(title, html, skip_external=True)
    viable = pipeline.filter_viable(detection.candidates)
    return BenchmarkResult(names={c.canonical_name for c in viable}, method="pattern_only")


async def detect_with_llm(title: str, html: str) -> BenchmarkResult:
    from config import settings
    from services.product_detection import LLMDeepExtractor, ProductDetectionPipeline

    if not settings.llm_api_key:
        logger.warning("LLM_API_KEY not set, skipping LLM-assisted detection")
        return BenchmarkResult(names=set(), method="llm_assisted")

    pipeline = ProductDetectionPipeline(deep_extractor=LLMDeepExtractor())
    detection = await pipeline.detect_candidates(title, html)
    viable = pipeline.filter_viable(detection.candidates)
    return BenchmarkResult(names={c.canonical_name for c in viable}, method="llm_assisted")


def evaluate_result(result: BenchmarkResult, expected: Set[str]) -> Dict:
    def normalize(s: str) -> str:
        return s.lower().strip()

    found = {normalize(n) for n in result.names}
    hits = {e for e in expected if any(e in f or f in e for f in found)}
    false_positives = {f for f in found if not any(e in f or f in e for e in expected)}

    precision = (len(found) - len(false_positives)) / len(found) if found else (1.0 if not expected else 0.0)
    recall = len(hits) / len(expected) if expected else 1.0

    return {
        "method": result.method,
        "extracted": sorted(result.names),
        "hits": len(hits),
        "false_positives": sorted(false_positives),
        "precision": round(precision, 2),
        "recall": round(recall, 2),
    }


async def run_benchmark():
    print("=" * 80)
    print("PRODUCT DETECTION BENCHMARK")
    print("=" * 80)

    methods = [
        ("Pattern Only", detect_pattern_only),
        ("LLM Assisted", detect_with_llm),
    ]

    all_results: Dict[str, List[Dict]] = {m[0]: [] for m in methods}

    for test_case in TEST_CASES:
        print(f"\n{'='*80}")
        print(f"TEST: {test_case['name']}")
        print(f"{'='*80}")

        for method_name, method_func in methods:
            print(f"\n--- {method_name} ---")
            result = await method_func(test_case["title"], test_case["html"])
            evaluation = evaluate_result(result, test_case["expected"])
            all_results[method_name].append(evaluation)

            print(f"Products: {evaluation['hits']}/{len(test_case['expected'])} found")
            print(f"  Precision: {evaluation['precision']}, Recall: {evaluation['recall']}")
            print(f"  Extracted: {evaluation['extracted']}")
            print(f"  False positives: {evaluation['false_positives']}")

    print(f"\n{'='*80}")
    print("SUMMARY")
    print(f"{'='*80}")

    for method_name, results in all_results.items():
        avg_precision = sum(r["precision"] for r in results) / len(results)
        avg_recall = sum(r["recall"] for r in results) / len(results)
        print(f"\n{method_name}: Precision {avg_precision:.2f}, Recall {avg_recall:.2f}")


if __name__ == "__main__":
    asyncio.run(run_benchmark())
