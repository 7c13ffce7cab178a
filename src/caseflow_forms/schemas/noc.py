"""
NOC verification: a no-objection certificate for a property or project.
"""

from caseflow_forms.models.enums import VerificationType
from caseflow_forms.models.mapping import ConditionalRule, FieldMappingTable, Mapped, VerificationSchema
from caseflow_forms.schemas.common import (
    AREA_MAPPING,
    AREA_REQUIRED,
    BASE_MAPPING,
    DATE,
    DATE_KIND,
    DERIVED_IGNORED,
    ENTRY_RESTRICTED,
    EXTRA_LANDMARK_MAPPING,
    INTEGER,
    NSP,
    NUMBER,
    POSITIVE,
    SELECT,
    SHIFTED,
    TEXT,
    TPC_MAPPING,
    TPC_RULE,
    UI_STATE_IGNORED,
    UNTRACEABLE,
    UNTRACEABLE_MAPPING,
    UNTRACEABLE_REQUIRED,
    area_assessment_fields,
    field,
    indicators,
    location_fields,
    security_entry_fields,
    tpc_fields,
    untraceable_fields,
)


_PROJECT = [POSITIVE, NSP]

FIELDS = [
    # --- Basic Information ---
    field("customerName", "Customer Name", TEXT, "Basic Information", 1, True),
    field("outcome", "Verification Outcome", SELECT, "Basic Information", 2, True),
    field("metPersonName", "Met Person Name", TEXT, "Basic Information", 3),
    field("metPersonDesignation", "Met Person Designation", TEXT, "Basic Information", 4),

    # --- NOC Details ---
    field("nocStatus", "NOC Status", SELECT, "NOC Details", 1, form_types=[POSITIVE]),
    field("nocType", "NOC Type", SELECT, "NOC Details", 2, form_types=[POSITIVE]),
    field("nocNumber", "NOC Number", TEXT, "NOC Details", 3, form_types=[POSITIVE]),
    field("nocIssueDate", "NOC Issue Date", DATE, "NOC Details", 4, form_types=[POSITIVE]),
    field("nocExpiryDate", "NOC Expiry Date", DATE, "NOC Details", 5, form_types=[POSITIVE]),
    field("nocIssuingAuthority", "NOC Issuing Authority", TEXT, "NOC Details", 6, form_types=[POSITIVE]),
    field("nocValidityStatus", "NOC Validity Status", SELECT, "NOC Details", 7, form_types=[POSITIVE]),

    # --- Project Details ---
    field("projectName", "Project Name", TEXT, "Project Details", 1, form_types=_PROJECT),
    field("builderName", "Builder Name", TEXT, "Project Details", 2, form_types=_PROJECT),
    field("propertyType", "Property Type", SELECT, "Project Details", 3, form_types=_PROJECT),
    field("projectStatus", "Project Status", SELECT, "Project Details", 4, form_types=[POSITIVE]),
    field("constructionStatus", "Construction Status", SELECT, "Project Details", 5, form_types=[POSITIVE]),
    field("totalUnits", "Total Units", NUMBER, "Project Details", 6, form_types=[POSITIVE]),
    field("completedUnits", "Completed Units", NUMBER, "Project Details", 7, form_types=[POSITIVE]),
    field("soldUnits", "Sold Units", NUMBER, "Project Details", 8, form_types=[POSITIVE]),
    field("possessionStatus", "Possession Status", SELECT, "Project Details", 9, form_types=[POSITIVE]),

    # --- Location Details ---
    *location_fields(restrict_rating=True),

    # --- Document Verification ---
    field("documentShownStatus", "Document Shown Status", SELECT, "Document Verification", 1, form_types=[POSITIVE]),
    field("documentType", "Document Type", SELECT, "Document Verification", 2, form_types=[POSITIVE]),
    field("documentVerificationStatus", "Document Verification Status", SELECT, "Document Verification", 3, form_types=[POSITIVE]),

    # --- Clearances ---
    field("environmentalClearance", "Environmental Clearance", SELECT, "Clearances", 1, form_types=[POSITIVE]),
    field("fireSafetyClearance", "Fire Safety Clearance", SELECT, "Clearances", 2, form_types=[POSITIVE]),
    field("pollutionClearance", "Pollution Clearance", SELECT, "Clearances", 3, form_types=[POSITIVE]),
    field("waterConnectionStatus", "Water Connection Status", SELECT, "Clearances", 4, form_types=[POSITIVE]),
    field("electricityConnectionStatus", "Electricity Connection Status", SELECT, "Clearances", 5, form_types=[POSITIVE]),

    # --- Third Party Confirmation ---
    *tpc_fields(),

    # --- Shifting Details (SHIFTED) ---
    field("shiftedPeriod", "Shifted Period", TEXT, "Shifting Details", 1, form_types=[SHIFTED]),
    field("currentLocation", "Current Location", TEXT, "Shifting Details", 2, form_types=[SHIFTED]),
    field("premisesStatus", "Premises Status", SELECT, "Shifting Details", 3, form_types=[SHIFTED]),

    # --- Entry Restriction / Contact ---
    *security_entry_fields(),
    *untraceable_fields(),

    # --- Area Assessment ---
    *area_assessment_fields(),
]


MAPPING = FieldMappingTable({
    **UI_STATE_IGNORED,
    **DERIVED_IGNORED,
    **BASE_MAPPING,
    **EXTRA_LANDMARK_MAPPING,
    **TPC_MAPPING,
    **UNTRACEABLE_MAPPING,
    **AREA_MAPPING,

    # NOC
    "nocStatus": Mapped("noc_status"),
    "nocType": Mapped("noc_type"),
    "nocNumber": Mapped("noc_number"),
    "nocIssueDate": Mapped("noc_issue_date", DATE_KIND),
    "nocExpiryDate": Mapped("noc_expiry_date", DATE_KIND),
    "nocIssuingAuthority": Mapped("noc_issuing_authority"),
    "nocValidityStatus": Mapped("noc_validity_status"),

    # Property / project
    "propertyType": Mapped("property_type"),
    "projectName": Mapped("project_name"),
    "projectStatus": Mapped("project_status"),
    "constructionStatus": Mapped("construction_status"),
    "projectApprovalStatus": Mapped("project_approval_status"),
    "totalUnits": Mapped("total_units", INTEGER),
    "completedUnits": Mapped("completed_units", INTEGER),
    "soldUnits": Mapped("sold_units", INTEGER),
    "possessionStatus": Mapped("possession_status"),

    # Builder / developer
    "builderName": Mapped("builder_name"),
    "builderContact": Mapped("builder_contact"),
    "developerName": Mapped("developer_name"),
    "developerContact": Mapped("developer_contact"),
    "builderRegistrationNumber": Mapped("builder_registration_number"),

    # Met person
    "metPersonName": Mapped("met_person_name"),
    "metPersonDesignation": Mapped("met_person_designation"),
    "metPersonRelation": Mapped("met_person_relation"),
    "metPersonContact": Mapped("met_person_contact"),

    # Documents
    "documentShownStatus": Mapped("document_shown_status"),
    "documentType": Mapped("document_type"),
    "documentVerificationStatus": Mapped("document_verification_status"),

    # Shifted / entry restricted
    "shiftedPeriod": Mapped("shifted_period"),
    "currentLocation": Mapped("current_location"),
    "premisesStatus": Mapped("premises_status"),
    "entryRestrictionReason": Mapped("entry_restriction_reason"),
    "securityPersonName": Mapped("security_person_name"),
    "securityConfirmation": Mapped("security_confirmation"),

    # Clearances and infrastructure
    "environmentalClearance": Mapped("environmental_clearance"),
    "fireSafetyClearance": Mapped("fire_safety_clearance"),
    "pollutionClearance": Mapped("pollution_clearance"),
    "waterConnectionStatus": Mapped("water_connection_status"),
    "electricityConnectionStatus": Mapped("electricity_connection_status"),
    "infrastructureStatus": Mapped("infrastructure_status"),
    "roadConnectivity": Mapped("road_connectivity"),
    "complianceIssues": Mapped("compliance_issues"),
    "regulatoryConcerns": Mapped("regulatory_concerns"),

    # Legacy names
    "metPerson": Mapped("met_person_name"),
    "companyName": Mapped("builder_name"),
    "projectDetails": Mapped("project_name"),
    "clearanceStatus": Mapped("environmental_clearance"),
})


REQUIRED_FIELDS = {
    POSITIVE: [
        "addressLocatable", "addressRating", "nocStatus", "nocType",
        "metPersonName", "metPersonDesignation", "projectName", "builderName",
        "propertyType", "projectStatus", "constructionStatus", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    SHIFTED: [
        "addressLocatable", "addressRating", "metPersonName", "metPersonDesignation",
        "shiftedPeriod", "currentLocation", "locality", "addressStructure", *AREA_REQUIRED,
    ],
    NSP: [
        "addressLocatable", "addressRating", "metPersonName", "metPersonDesignation",
        "projectName", "builderName", "locality", "addressStructure", *AREA_REQUIRED,
    ],
    ENTRY_RESTRICTED: [
        "addressLocatable", "addressRating", "entryRestrictionReason",
        "securityPersonName", "securityConfirmation", "locality", "addressStructure",
        *AREA_REQUIRED,
    ],
    UNTRACEABLE: UNTRACEABLE_REQUIRED,
}


CONDITIONAL_RULES = [
    ConditionalRule(
        when="nocStatus", equals="Available", then="nocNumber",
        message="nocNumber should be specified when NOC is available",
    ),
    ConditionalRule(
        when="nocStatus", equals="Available", then="nocValidityStatus",
        message="nocValidityStatus should be specified when NOC is available",
    ),
    TPC_RULE,
    ConditionalRule(when="totalUnits", then="completedUnits"),
]


SCHEMA = VerificationSchema(
    verification_type=VerificationType.NOC,
    table_name="nocVerificationReports",
    fields=FIELDS,
    mapping=MAPPING,
    required_fields=REQUIRED_FIELDS,
    conditional_rules=CONDITIONAL_RULES,
    detection_indicators=indicators(
        positive=["nocNumber", "nocStatus", "issuingAuthority", "nocValidityDate", "complianceStatus"],
        shifted=["shiftedPeriod", "currentLocation", "premisesStatus", "nocTransferred"],
        nsp=["nocStatus", "temporaryNoc", "conditionalNoc"],
        entry_restricted=["entryRestrictionReason", "securityPersonName", "documentRestricted"],
        untraceable=["callRemark", "contactPerson", "nocCancelled", "authorityUntraceable"],
    ),
)
