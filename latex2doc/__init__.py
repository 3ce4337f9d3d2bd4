"""latex2doc - LaTeX to Word-openable HTML conversion through a generative model."""

from latex2doc.config import Latex2DocConfig, load_config
from latex2doc.converter import ConversionOptions, build_conversion_prompt
from latex2doc.converter.gateway import ConversionGateway
from latex2doc.export import WordExporter
from latex2doc.llm import LLMProvider, create_llm_provider
from latex2doc.workflow import ConversionWorkflow

__version__ = "0.1.0"

__all__ = [
    "ConversionGateway",
    "ConversionOptions",
    "ConversionWorkflow",
    "LLMProvider",
    "Latex2DocConfig",
    "WordExporter",
    "build_conversion_prompt",
    "create_llm_provider",
    "load_config",
]
