"""Console driver: translate sample radiology impressions and print the results."""
from __future__ import annotations
import argparse
import asyncio
import getpass
import logging
from typing import Any, Iterable

import yaml

from radreport_explainer.common.logging_setup import setup_logging
from radreport_explainer.common.schema import SampleCase, TranslationResult
from radreport_explainer.config import LOG_LEVEL, MAX_CHARACTERS, MODEL_ID, get_api_key
from radreport_explainer.engine.client import TranslationEngine
from radreport_explainer.engine.shaping import RULE, format_output

LOGGER = logging.getLogger("radreport.cli.samples")

SAMPLE_CASES: tuple[SampleCase, ...] = (
    SampleCase(
        name="Chest X-ray: Pneumonia",
        impression="Right lower lobe pneumonia. Small right pleural effusion. Heart size normal. No pneumothorax.",
    ),
    SampleCase(
        name="Brain MRI: Normal",
        impression=(
            "No acute intracranial abnormality. No mass effect, midline shift, or abnormal enhancement. "
            "Ventricles and sulci are normal in size and configuration."
        ),
    ),
    SampleCase(
        name="Knee X-ray: Arthritis",
        impression=(
            "Mild degenerative changes of the medial compartment with joint space narrowing "
            "and small osteophytes. No acute fracture or dislocation."
        ),
    ),
)


def load_samples(path: str) -> list[SampleCase]:
    """
    Load sample cases from a YAML list of {name, impression} mappings.

    Args:
        path: YAML file path.
    """
    with open(path, "r", encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of samples")
    cases = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or "impression" not in item:
            raise ValueError(f"{path}: sample #{i} needs an 'impression' field")
        cases.append(SampleCase(name=str(item.get("name", f"Sample {i + 1}")), impression=str(item["impression"])))
    return cases


def resolve_api_key() -> str:
    """Credential from the environment, else read interactively."""
    api_key = get_api_key()
    if api_key is None:
        api_key = getpass.getpass("Enter your Anthropic API key: ").strip()
    return api_key


def render_case(case: SampleCase, result: TranslationResult) -> str:
    lines = [
        "",
        RULE,
        f"TEST: {case.name}",
        RULE,
        "",
        f"ORIGINAL IMPRESSION:\n{case.impression}",
        "",
    ]
    if result.success:
        lines += [
            "✓ TRANSLATION SUCCESSFUL",
            "",
            f"Response Time: {result.response_time_ms:.0f}ms",
            f"Character Count: {result.character_count}/{MAX_CHARACTERS}",
            "",
            format_output(result),
        ]
    else:
        lines += [
            "✗ TRANSLATION FAILED",
            "",
            f"Error: {result.error_message}",
        ]
    lines += ["", RULE, ""]
    return "\n".join(lines)


async def run_samples(
    engine: TranslationEngine,
    cases: Iterable[SampleCase],
    concurrent: bool = False,
) -> list[TranslationResult]:
    """
    Translate each case and print its block, keeping input order.

    Args:
        engine: Configured translation engine.
        cases: Samples to translate.
        concurrent: Issue all requests at once instead of one after another.
    """
    cases = list(cases)
    if concurrent:
        results = list(await asyncio.gather(*(engine.translate(c.impression) for c in cases)))
        for case, result in zip(cases, results):
            print(render_case(case, result))
        return results

    results = []
    for case in cases:
        LOGGER.debug("Translating %s", case.name)
        result = await engine.translate(case.impression)
        print(render_case(case, result))
        results.append(result)
    return results


def main() -> None:
    setup_logging(LOG_LEVEL)
    ap = argparse.ArgumentParser(description="Translate sample radiology impressions")
    ap.add_argument("--samples", default=None, help="YAML file of {name, impression} samples")
    ap.add_argument("--model", default=MODEL_ID, help="Model identifier")
    ap.add_argument("--concurrent", action="store_true", help="Send all samples at once")
    args = ap.parse_args()

    print("=" * 46)
    print("Radiology Translation Engine - Sample Run")
    print("=" * 46)

    cases = load_samples(args.samples) if args.samples else list(SAMPLE_CASES)
    engine = TranslationEngine(resolve_api_key(), model=args.model)
    LOGGER.info("Running %s samples against %s", len(cases), args.model)
    asyncio.run(run_samples(engine, cases, concurrent=args.concurrent))

if __name__ == "__main__":
    main()
