"""
Builder verification: a developer's site office and the projects it runs.

Builder reports are stored in a wide table that also carries project, RERA
and licence columns the mobile form does not always send, so the schema
lists every destination column and a per-outcome relevance list explicitly.
"""

from caseflow_forms.models.enums import VerificationType
from caseflow_forms.models.mapping import ConditionalRule, FieldMappingTable, Mapped, VerificationSchema
from caseflow_forms.schemas.common import (
    AREA_MAPPING,
    AREA_REQUIRED,
    BASE_MAPPING,
    DECIMAL,
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
    met_person_entry_fields,
    tpc_fields,
    untraceable_fields,
)


FIELDS = [
    # --- Basic Information ---
    field("customerName", "Customer Name", TEXT, "Basic Information", 1, True),
    field("outcome", "Verification Outcome", SELECT, "Basic Information", 2, True),
    field("metPerson", "Met Person Name", TEXT, "Basic Information", 3),
    field("designation", "Designation", TEXT, "Basic Information", 4),

    # --- Builder Details ---
    field("builderName", "Builder Name", TEXT, "Builder Details", 1),
    field("builderOwnerName", "Builder Owner Name", TEXT, "Builder Details", 2),
    field("builderType", "Builder Type", SELECT, "Builder Details", 3, form_types=[POSITIVE]),
    field("officeStatus", "Office Status", SELECT, "Builder Details", 4),
    field("companyNatureOfBusiness", "Company Nature of Business", TEXT, "Builder Details", 5, form_types=[POSITIVE]),
    field("businessPeriod", "Business Period", TEXT, "Builder Details", 6, form_types=[POSITIVE]),
    field("establishmentPeriod", "Establishment Period", TEXT, "Builder Details", 7, form_types=[POSITIVE]),
    field("officeApproxArea", "Office Approx Area", NUMBER, "Builder Details", 8, form_types=[POSITIVE]),
    field("staffStrength", "Staff Strength", NUMBER, "Builder Details", 9, form_types=[POSITIVE]),
    field("staffSeen", "Staff Seen", NUMBER, "Builder Details", 10, form_types=[POSITIVE]),
    field("workingPeriod", "Working Period", TEXT, "Builder Details", 11, form_types=[POSITIVE]),
    field("workingStatus", "Working Status", SELECT, "Builder Details", 12, form_types=[POSITIVE]),
    field("documentShown", "Document Shown", SELECT, "Builder Details", 13, form_types=[POSITIVE]),

    # --- Location Details ---
    *location_fields(),
    field("companyNamePlateStatus", "Company Name Plate Status", SELECT, "Location Details", 12, form_types=[POSITIVE, SHIFTED, NSP]),
    field("nameOnCompanyBoard", "Name on Company Board", TEXT, "Location Details", 13, form_types=[POSITIVE, SHIFTED, NSP]),

    # --- Third Party Confirmation ---
    *tpc_fields(),

    # --- Shifting Details (SHIFTED) ---
    field("currentCompanyName", "Current Company Name", TEXT, "Shifting Details", 1, form_types=[SHIFTED]),
    field("oldOfficeShiftedPeriod", "Old Office Shifted Period", TEXT, "Shifting Details", 2, form_types=[SHIFTED]),
    field("currentCompanyPeriod", "Current Company Period", TEXT, "Shifting Details", 3, form_types=[SHIFTED]),
    field("premisesStatus", "Premises Status", SELECT, "Shifting Details", 4, form_types=[SHIFTED]),

    # --- NSP Details ---
    field("officeExistence", "Office Existence", SELECT, "NSP Details", 1, form_types=[NSP]),

    # --- Entry Restriction / Contact ---
    *met_person_entry_fields(),
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
    "companyNamePlateStatus": Mapped("company_nameplate_status"),
    "nameOnBoard": Mapped("name_on_company_board"),
    "nameOnCompanyBoard": Mapped("name_on_company_board"),

    # Builder / office status and details
    "officeStatus": Mapped("office_status"),
    "officeExistence": Mapped("office_existence"),
    "builderType": Mapped("builder_type"),
    "companyNatureOfBusiness": Mapped("company_nature_of_business"),
    "businessPeriod": Mapped("business_period"),
    "establishmentPeriod": Mapped("establishment_period"),
    "officeApproxArea": Mapped("office_approx_area", DECIMAL),
    "staffStrength": Mapped("staff_strength", INTEGER),
    "staffSeen": Mapped("staff_seen", INTEGER),

    # Person details
    "metPerson": Mapped("met_person_name"),
    "metPersonName": Mapped("met_person_name"),
    "designation": Mapped("designation"),
    "builderName": Mapped("builder_name"),
    "builderOwnerName": Mapped("builder_owner_name"),
    "workingPeriod": Mapped("working_period"),
    "workingStatus": Mapped("working_status"),
    "documentShown": Mapped("document_shown"),

    # Shifted / entry restricted
    "shiftedPeriod": Mapped("shifted_period"),
    "oldOfficeShiftedPeriod": Mapped("old_office_shifted_period"),
    "currentCompanyName": Mapped("current_company_name"),
    "currentCompanyPeriod": Mapped("current_company_period"),
    "premisesStatus": Mapped("premises_status"),
    "nameOfMetPerson": Mapped("name_of_met_person"),
    "metPersonType": Mapped("met_person_type"),
    "metPersonConfirmation": Mapped("met_person_confirmation"),
    "applicantWorkingStatus": Mapped("applicant_working_status"),
    "otherExtraRemark": Mapped("other_extra_remark"),

    # Legacy names
    "companyName": Mapped("company_nature_of_business"),
    "totalEmployees": Mapped("staff_strength", INTEGER),
    "businessNature": Mapped("company_nature_of_business"),
})


# Columns of builderVerificationReports the form has no key for
EXTRA_COLUMNS = [
    "applicant_designation", "applicant_working_premises",
    "project_name", "project_type", "project_status", "project_approval_status",
    "project_completion_status", "project_area", "total_units", "sold_units",
    "construction_stage", "approval_authority", "rera_registration", "rera_number",
    "document_type", "license_status", "license_number",
]

_COMMON_RELEVANT = [
    "address_floor", "address_structure_color", "door_color", "company_nameplate_status",
    "name_on_company_board", "landmark1", "landmark2",
]

RELEVANT_COLUMNS = {
    POSITIVE: [
        "address_locatable", "address_rating", "office_status", "met_person_name",
        "designation", "working_period", "applicant_designation", "working_status",
        "builder_type", "company_nature_of_business", "staff_strength", "locality",
        "address_structure", "political_connection", "dominated_area", "feedback_from_neighbour",
        "other_observation", "final_status", "business_period", "establishment_period",
        "office_approx_area", "staff_seen", "document_shown", "document_type",
        "project_name", "project_type", "project_status", "project_approval_status",
        "project_completion_status", "project_area", "total_units", "sold_units",
        "construction_stage", "approval_authority", "rera_registration", "rera_number",
        "license_status", "license_number", "tpc_met_person1", "tpc_name1", "tpc_confirmation1",
        *_COMMON_RELEVANT,
    ],
    SHIFTED: [
        "address_locatable", "address_rating", "office_status", "met_person_name",
        "designation", "current_company_name", "old_office_shifted_period", "locality",
        "address_structure", "political_connection", "dominated_area", "feedback_from_neighbour",
        "other_observation", "final_status", *_COMMON_RELEVANT,
    ],
    NSP: [
        "address_locatable", "address_rating", "office_status", "office_existence",
        "met_person_name", "designation", "locality", "address_structure",
        "political_connection", "dominated_area", "feedback_from_neighbour",
        "other_observation", "final_status", *_COMMON_RELEVANT,
    ],
    ENTRY_RESTRICTED: [
        "address_locatable", "address_rating", "name_of_met_person", "met_person_type",
        "met_person_confirmation", "applicant_working_status", "locality",
        "address_structure", "political_connection", "dominated_area",
        "feedback_from_neighbour", "other_observation", "final_status",
        "address_floor", "address_structure_color", "company_nameplate_status",
        "name_on_company_board", "landmark1", "landmark2",
    ],
    UNTRACEABLE: [
        "contact_person", "call_remark", "locality", "landmark1", "landmark2", "landmark3",
        "landmark4", "dominated_area", "other_observation", "final_status",
    ],
}


REQUIRED_FIELDS = {
    POSITIVE: [
        "addressLocatable", "addressRating", "officeStatus", "metPerson",
        "designation", "builderType", "builderName", "workingPeriod",
        "workingStatus", "companyNatureOfBusiness", "businessPeriod", "staffStrength",
        "locality", "addressStructure", *AREA_REQUIRED,
    ],
    SHIFTED: [
        "addressLocatable", "addressRating", "officeStatus", "metPerson",
        "designation", "currentCompanyName", "oldOfficeShiftedPeriod", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    NSP: [
        "addressLocatable", "addressRating", "officeStatus", "officeExistence",
        "metPerson", "designation", "locality", "addressStructure", *AREA_REQUIRED,
    ],
    ENTRY_RESTRICTED: [
        "addressLocatable", "addressRating", "nameOfMetPerson", "metPersonType",
        "metPersonConfirmation", "applicantWorkingStatus", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    UNTRACEABLE: UNTRACEABLE_REQUIRED,
}


CONDITIONAL_RULES = [
    ConditionalRule(
        when="officeStatus", equals="Opened", then="staffSeen",
        message="staffSeen should be specified when office is opened",
    ),
    TPC_RULE,
]


SCHEMA = VerificationSchema(
    verification_type=VerificationType.BUILDER,
    table_name="builderVerificationReports",
    fields=FIELDS,
    mapping=MAPPING,
    required_fields=REQUIRED_FIELDS,
    conditional_rules=CONDITIONAL_RULES,
    extra_columns=EXTRA_COLUMNS,
    relevant_columns=RELEVANT_COLUMNS,
    detection_indicators=indicators(
        positive=["builderName", "projectName", "reraNumber", "projectStatus", "totalUnits"],
        shifted=["shiftedPeriod", "currentLocation", "premisesStatus", "projectShifted"],
        nsp=["projectStatus", "constructionStatus", "temporaryOffice"],
        entry_restricted=["entryRestrictionReason", "securityPersonName", "siteRestricted"],
        untraceable=["callRemark", "contactPerson", "projectAbandoned", "builderUntraceable"],
    ),
)
