"""Tests for inferring the form type of a submission."""

from caseflow_forms.models.enums import DetectionMethod, FormType
from caseflow_forms.services.form_type_detection import FormTypeDetector


class TestOutcomeMapping:
    def test_exact_outcome_label(self, engine):
        result = engine.detect_form_type({"outcome": "Positive & Door Locked"}, "RESIDENCE")
        assert result.form_type is FormType.POSITIVE
        assert result.confidence == 100
        assert result.detection_method is DetectionMethod.OUTCOME_MAPPING

    def test_legacy_outcome(self, engine):
        result = engine.detect_form_type({"finalStatus": "NEGATIVE"}, "OFFICE")
        assert result.form_type is FormType.NSP
        assert result.confidence == 75
        assert result.detection_method is DetectionMethod.LEGACY_MAPPING
        assert result.verification_outcome == "NSP & Door Lock"

    def test_outcome_keys_are_case_sensitive(self):
        result = FormTypeDetector().detect_by_outcome({"outcome": "shifted"})
        assert result is None


class TestFieldIndicators:
    def test_indicator_fields_win(self, config):
        detector = FormTypeDetector(config.schema_for("RESIDENCE"))
        result = detector.detect({"shiftedPeriod": "2 years", "roomStatus": "Closed", "premisesStatus": "Vacant"})
        assert result.form_type is FormType.SHIFTED
        assert result.confidence == 95
        assert result.detection_method is DetectionMethod.FIELD_INDICATORS

    def test_weak_indicators_fall_through(self, config):
        submission = {f"note{i}": "x" for i in range(19)}
        submission["houseStatus"] = "Opened"
        result = FormTypeDetector(config.schema_for("RESIDENCE")).detect(submission)
        assert result.detection_method is DetectionMethod.DEFAULT_FALLBACK

    def test_scores_per_form_type(self, config):
        scores = FormTypeDetector(config.schema_for("RESIDENCE")).indicator_scores(
            {"callRemark": "Not reachable", "contactPerson": "Neighbour", "landmark3": ""}
        )
        assert scores[FormType.UNTRACEABLE] == 40
        assert scores[FormType.POSITIVE] == 0


class TestPatterns:
    def test_unreachable_phone(self):
        result = FormTypeDetector().detect({"callRemark": "Number Not Reachable"})
        assert result.form_type is FormType.UNTRACEABLE
        assert result.detection_method is DetectionMethod.PATTERN_ANALYSIS

    def test_shifted_address(self):
        result = FormTypeDetector().detect({"currentLocation": "Pune", "shiftedPeriod": "1 year"})
        assert result.form_type is FormType.SHIFTED
        assert result.confidence == 80

    def test_security_without_met_person(self):
        result = FormTypeDetector().detect({"securityPersonName": "Guard"})
        assert result.form_type is FormType.ENTRY_RESTRICTED

    def test_temporary_stay(self):
        result = FormTypeDetector().detect({"stayingStatus": "Temporary tenant"})
        assert result.form_type is FormType.NSP
        assert result.confidence == 70


class TestFallback:
    def test_empty_submission(self, engine):
        result = engine.detect_form_type({}, "RESIDENCE")
        assert result.form_type is FormType.POSITIVE
        assert result.confidence == 50
        assert result.detection_method is DetectionMethod.DEFAULT_FALLBACK

    def test_unknown_verification_type_still_detects(self, engine):
        result = engine.detect_form_type({"callRemark": "not reachable"}, "UNKNOWN_TYPE")
        assert result.form_type is FormType.UNTRACEABLE


class TestAnalysis:
    def test_analysis_evidence(self, engine):
        analysis = engine.analyze_form_type_detection(
            {"outcome": "UNTRACEABLE", "callRemark": "not reachable"}, "RESIDENCE"
        )
        assert analysis["result"] == {
            "formType": "UNTRACEABLE",
            "verificationOutcome": "Untraceable",
            "confidence": 95,
            "detectionMethod": "outcome_mapping",
        }
        details = analysis["analysis"]
        assert details["outcomeFound"] is True
        assert details["fieldIndicators"]["UNTRACEABLE"] == 20
        assert details["patternMatches"] == ["phone_unreachable"]
        assert details["totalFields"] == 2
        assert details["confidenceFactors"] == ["direct_outcome_mapping", "pattern_matches"]
