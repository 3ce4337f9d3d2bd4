"""Shared test fixtures for latex2doc."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from latex2doc.config.models import Latex2DocConfig
from latex2doc.converter.gateway import ConversionGateway
from latex2doc.llm.base import LLMProvider
from latex2doc.llm.models import LLMConfig as LLMRuntimeConfig, LLMResponse, TokenUsage
from latex2doc.workflow.controller import ConversionWorkflow

SAMPLE_HTML = "<html><body><h1>A</h1></body></html>"


@pytest.fixture
def sample_latex():
    return (
        "\\documentclass{article}\n"
        "\\begin{document}\n"
        "\\section{Introduction}\n"
        "Energy is $E = mc^2$.\n"
        "\\end{document}\n"
    )


@pytest.fixture
def mock_llm_provider():
    provider = MagicMock(spec=LLMProvider)
    provider.config = LLMRuntimeConfig(provider="google", model="test-model")
    provider.generate = AsyncMock(
        return_value=LLMResponse(
            content=SAMPLE_HTML,
            usage=TokenUsage(input_tokens=100, output_tokens=250),
            model="test-model",
        )
    )
    return provider


@pytest.fixture
def gateway(mock_llm_provider):
    return ConversionGateway(mock_llm_provider)


@pytest.fixture
def workflow(gateway):
    return ConversionWorkflow(gateway)


@pytest.fixture
def sample_config():
    return Latex2DocConfig()


@pytest.fixture
def tex_file(tmp_path, sample_latex):
    path = tmp_path / "paper.tex"
    path.write_text(sample_latex, encoding="utf-8")
    return path
