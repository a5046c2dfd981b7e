"""Summarizer and image analyzer flows."""

from nuvia.core.exceptions import FlowOutputError, MediaError
from nuvia.flows import base
from nuvia.flows.media import media_content_blocks, parse_data_uri
from nuvia.models.study import (
    AnalyzeImageInput,
    AnalyzeImageOutput,
    SummarizeDocumentInput,
    SummarizeDocumentOutput,
)

SUMMARIZE_SYSTEM_PROMPT = """You are Nuvia, an expert study assistant. Summarize documents for students.
Write a clear, well-structured summary: open with one or two sentences on what the document is about, then cover the main points as short bullet points, and highlight key terms in **bold**.
Base the summary only on the document."""

ANALYZE_SYSTEM_PROMPT = """You are Nuvia, an expert study assistant that analyzes images for students.
Describe what the image shows. Transcribe any visible text, explain any diagrams or charts, and if the image contains a question or problem, solve it step by step."""


def summarize_document(summary_input: SummarizeDocumentInput) -> SummarizeDocumentOutput:
    """
    Summarize a document given as a data URI.

    Raises:
        FlowOutputError: If the model returns no summary
        MediaError: If the document cannot be read
    """
    content = base.build_content(
        "Document:",
        media_content_blocks(summary_input.document_data_uri),
        "Summarize this document.",
    )
    output = base.run_structured_prompt(
        SummarizeDocumentOutput,
        SUMMARIZE_SYSTEM_PROMPT,
        content,
        flow_name="summarize_document",
    )
    if output is None or not output.summary.strip():
        raise FlowOutputError("AI failed to summarize the document.", flow="summarize_document")
    return output


def analyze_image(image_input: AnalyzeImageInput) -> AnalyzeImageOutput:
    """
    Analyze an image given as a data URI.

    Raises:
        MediaError: If the data URI is not an image
        FlowOutputError: If the model returns no analysis
    """
    if not parse_data_uri(image_input.photo_data_uri).is_image:
        raise MediaError("Please upload an image (JPG, PNG, etc.) to analyze.")

    content = base.build_content(
        media_content_blocks(image_input.photo_data_uri),
        "Analyze this image.",
    )
    output = base.run_structured_prompt(
        AnalyzeImageOutput,
        ANALYZE_SYSTEM_PROMPT,
        content,
        flow_name="analyze_image",
    )
    if output is None or not output.analysis_results.strip():
        raise FlowOutputError("AI failed to analyze the image.", flow="analyze_image")
    return output
