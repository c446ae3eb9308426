"""Configuration module for plag-basic."""

import os
from typing import Literal
from pydantic import BaseModel, Field, ConfigDict
from dotenv import load_dotenv

from .metrics import SimilarityMetric, metric_from_name

# Load environment variables from .env file
load_dotenv()


class Config(BaseModel):
    """Configuration for the plagiarism detection system."""

    # Matching settings
    sensitivity: int = Field(
        default_factory=lambda: os.getenv("PLAG_SENSITIVITY", "5"),
        ge=1,
        description="Number of words that form one fragment (n)"
    )
    similarity: int = Field(
        default_factory=lambda: os.getenv("PLAG_SIMILARITY", "0"),
        ge=0,
        description="Cutoff value for the chosen metric (s)"
    )
    metric: Literal["equal", "lev"] = Field(
        default_factory=lambda: os.getenv("PLAG_METRIC", "equal"),
        description="Fragment comparison metric"
    )

    # Report settings
    output_dir: str = Field(
        default_factory=lambda: os.getenv("PLAG_OUTPUT_DIR", "./www"),
        description="Directory the HTML report is written to"
    )
    report_name: str = Field(
        default="report.html",
        description="File name of the HTML report"
    )

    def build_metric(self) -> SimilarityMetric:
        """Build the metric value used by the match engine."""
        return metric_from_name(self.metric, self.similarity)

    model_config = ConfigDict(
        validate_assignment=True,
        validate_default=True,
        extra="forbid"
    )
