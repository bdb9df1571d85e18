"""
Main analyzer that coordinates all the extraction steps.
"""
from pinfo.classifier import ExternalClassifier
from pinfo.core import classify_file_type, classify_magic, compute_file_size, compute_hashes
from pinfo.errors import AnalysisError, ClassifierError
from pinfo.log import get_logger
from pinfo.parsing import (
    collect_libraries, collect_sections, collect_symbols,
    get_machine, get_optional_magic, load_pe
)
from pinfo.report import Report

logger = get_logger(__name__)


class PEAnalyzer:
    """Builds the Report for one PE file.

    Hashing, sizing and header parsing failures are fatal and propagate.
    Imports, symbols and sections degrade to empty on failure, and a
    classifier failure leaves the verdict unset; both are logged and kept
    in `Report.warnings`.
    """

    def __init__(self, file_path, classifier=None):
        self.file_path = str(file_path)
        self.classifier = classifier

    def analyze(self):
        """Run every step and return the finished Report."""
        logger.info(f"Starting analysis of {self.file_path}")

        try:
            f = open(self.file_path, 'rb')
        except OSError as e:
            raise AnalysisError(f"Could not open file: {e}", self.file_path) from e

        with f:
            hashes = compute_hashes(f, self.file_path)
            file_size = compute_file_size(f, self.file_path)
            try:
                data = f.read()
            except OSError as e:
                raise AnalysisError(f"Could not read file: {e}", self.file_path) from e

        pe = load_pe(data, self.file_path)
        try:
            warnings = []
            libraries = self._extract('imported libraries', collect_libraries, pe, warnings)
            symbols = self._extract('imported symbols', collect_symbols, pe, warnings)
            sections = self._extract('sections', collect_sections, pe, warnings)
            classifier_result = self.run_classifier(warnings)

            report = Report(
                name=self.file_path,
                md5=hashes.md5,
                sha1=hashes.sha1,
                sha256=hashes.sha256,
                file_type=classify_file_type(get_machine(pe)),
                magic=classify_magic(get_optional_magic(pe)),
                file_size=file_size,
                libraries=libraries,
                symbols=symbols,
                sections=sections,
                classifier_result=classifier_result,
                warnings=tuple(warnings)
            )
        finally:
            pe.close()

        logger.info("Analysis complete!")
        return report

    def _extract(self, label, step, pe, warnings):
        try:
            return step(pe)
        except Exception as e:
            message = f"Error getting {label}: {e}"
            logger.warning(message)
            warnings.append(message)
            return ()

    def run_classifier(self, warnings):
        """Ask the classifier for a verdict; None when disabled or failed."""
        if self.classifier is None:
            return None

        try:
            verdict = self.classifier.classify(self.file_path)
        except ClassifierError as e:
            message = f"Classifier gave no result: {e.message}"
            logger.warning(message)
            warnings.append(message)
            return None

        logger.debug(f"Classifier verdict for {self.file_path}: {verdict}")
        return verdict


def analyze_file(file_path, use_model=False, settings=None, classifier=None):
    """Analyze one file, optionally consulting the external classifier.

    An explicit `classifier` wins over the one built from `settings`.
    """
    if use_model and classifier is None:
        if settings is not None:
            classifier = ExternalClassifier(settings.classifier_cmd, settings.classifier_timeout)
        else:
            classifier = ExternalClassifier()
    elif not use_model:
        classifier = None

    return PEAnalyzer(file_path, classifier).analyze()
