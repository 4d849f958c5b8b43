"""Main processing pipeline orchestration."""

import time

from loguru import logger

from spellpy.core import CheckResult, Config
from spellpy.data import InputProvider, get_input_provider, tokenize
from spellpy.processing.stages import (
    LexiconData,
    OutputResult,
    WordCheckResult,
    check_words,
    load_lexicon_stage,
)
from spellpy.reports import ReportData, format_time, generate_reports
from spellpy.sinks import ResultSink, get_result_sink


def write_results(
    check_result: WordCheckResult, sink: ResultSink, config: Config
) -> OutputResult:
    """Stage 3: write misspellings through the sink."""
    start_time = time.time()
    sink.write(check_result.check_result, config.output, config)
    return OutputResult(
        misspellings_written=len(check_result.check_result.misspellings),
        elapsed_time=time.time() - start_time,
    )


def _build_report_data(
    start_time: float,
    input_name: str,
    lexicon_data: LexiconData,
    check_result: WordCheckResult,
    output_result: OutputResult,
) -> ReportData:
    result = check_result.check_result
    return ReportData(
        start_time=start_time,
        stage_times={
            "Loading lexicon": lexicon_data.elapsed_time,
            "Checking words": check_result.elapsed_time,
            "Writing results": output_result.elapsed_time,
        },
        input_name=input_name,
        lexicon_size=len(lexicon_data.lexicon),
        words_checked=result.words_checked,
        unique_words=result.unique_words,
        misspellings_reported=output_result.misspellings_written,
        suggestions=check_result.suggestions,
        occurrences=check_result.occurrences,
    )


def run_pipeline(
    config: Config,
    input_provider: InputProvider | None = None,
    sink: ResultSink | None = None,
) -> CheckResult:
    """Main processing pipeline orchestrating all stages.

    The lexicon is loaded before the input is read, so a broken dictionary
    is reported even when no input is available.

    Args:
        config: Configuration object containing all settings
        input_provider: Source of the text to check (if None, created from config.input)
        sink: Result writer (if None, created from config.format)

    Returns:
        CheckResult with the misspellings found

    Raises:
        LoadError: If the lexicon source cannot be read
        IntegrityError: If the lexicon has an unexpected size
        InputUnavailable: If the input text cannot be read
    """
    start_time = time.time()
    verbose = config.verbose

    if input_provider is None:
        input_provider = get_input_provider(config.input)
    if sink is None:
        sink = get_result_sink(config.format)

    # Stage 1: Load lexicon
    if verbose:
        logger.info("# Loading lexicon...")
    lexicon_data = load_lexicon_stage(config, verbose)

    # Stage 2: Check words
    if verbose:
        logger.info(f"# Checking words in {input_provider.describe()}...")
    text = input_provider.read_text()
    check_result = check_words(lexicon_data, tokenize(text), config, verbose)

    # Stage 3: Write results
    output_result = write_results(check_result, sink, config)

    # Stage 4: Reports
    if config.reports:
        report_data = _build_report_data(
            start_time, input_provider.describe(), lexicon_data, check_result, output_result
        )
        generate_reports(report_data, config.reports, verbose)

    if verbose:
        result = check_result.check_result
        logger.info(
            f"# Found {len(result.misspelled_words)} misspelled words "
            f"in {format_time(time.time() - start_time)}"
        )

    return check_result.check_result
