#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging
from pathlib import Path

import hydra
from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

from nextdate import __version__
from nextdate.constants import CONFIG_FILE_NAME, METRICS_FILE_NAME, RESULTS_FILE_NAME
from nextdate.engine import RecurrenceEngine
from nextdate.readers import load_cases
from nextdate.schema import NextDateResult
from nextdate.utils import summarise_results
from nextdate.writers import save_json, save_jsonl, save_nestedtext

logger = logging.getLogger(__name__)

FAILURES_FILE_NAME = "failures.nt"


def run_batch(cfg: DictConfig) -> list[NextDateResult]:
    """Compute the next date for every case in `cfg.cases_file` and save
    the results, metrics and resolved config under `cfg.output_dir`."""
    output_dir = Path(cfg.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    OmegaConf.save(config=cfg, f=output_dir / CONFIG_FILE_NAME)
    if cfg.debug:
        logger.info(OmegaConf.to_yaml(cfg, resolve=True))

    engine: RecurrenceEngine = instantiate(cfg.engine)
    results = []
    for case in load_cases(cfg.cases_file):
        logger.debug(f"Evaluating case {case.case_id}")
        results.append(engine.evaluate(case))

    save_jsonl(results, output_dir / RESULTS_FILE_NAME)
    metrics = summarise_results(results)
    save_json(metrics, output_dir / METRICS_FILE_NAME)
    failures = {
        r.case.case_id: {
            **r.case.model_dump(exclude={"case_id"}, exclude_none=True),
            "error": r.format_outcome(),
        }
        for r in results
        if not r.ok
    }
    if failures:
        save_nestedtext(failures, output_dir / FAILURES_FILE_NAME)
    logger.info(
        f"Computed {metrics['computed']} of {metrics['total']} cases, "
        f"{metrics['failed']} failed. Results saved to {output_dir}"
    )
    return results


@hydra.main(version_base=None, config_name="default", config_path="../configs/batch")
def batch_next_dates(cfg: DictConfig):
    logger.info(f"Running nextdate {__version__} batch")
    run_batch(cfg)


if __name__ == "__main__":
    batch_next_dates()
