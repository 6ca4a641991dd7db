from functools import lru_cache

from loguru import logger

from app.data.civil_engineering import CURRICULUM
from app.services.graph import CurriculumGraph, validate_curriculum


@lru_cache(maxsize=1)
def get_curriculum() -> CurriculumGraph:
    logger.info("Loading bundled curriculum ({} subjects)", len(CURRICULUM))
    return validate_curriculum(CURRICULUM)
