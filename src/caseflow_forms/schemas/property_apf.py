"""
Property APF verification: a project approved for financing, checked at the
builder's site.
"""

from caseflow_forms.models.enums import VerificationType
from caseflow_forms.models.mapping import (
    ComparisonRule,
    ConditionalRule,
    FieldMappingTable,
    Mapped,
    RangeRule,
    VerificationSchema,
)
from caseflow_forms.schemas.common import (
    AREA_MAPPING,
    AREA_REQUIRED,
    BASE_MAPPING,
    DATE,
    DATE_KIND,
    DECIMAL,
    DERIVED_IGNORED,
    ENTRY_RESTRICTED,
    EXTRA_LANDMARK_MAPPING,
    HOLD_RULE,
    INTEGER,
    NSP,
    NUMBER,
    POSITIVE,
    PROPERTY_AREA_RULE,
    PROPERTY_NOT_FOUND_RULE,
    PROPERTY_VALUE_RULE,
    SELECT,
    SHIFTED,
    TEXT,
    TPC_MAPPING,
    TPC_RULE,
    TPC_SELECTED_RULE,
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

    # --- Property Details ---
    field("propertyType", "Property Type", SELECT, "Property Details", 1, form_types=_PROJECT),
    field("propertyStatus", "Property Status", SELECT, "Property Details", 2, form_types=[POSITIVE]),
    field("propertyOwnership", "Property Ownership", SELECT, "Property Details", 3, form_types=[POSITIVE]),
    field("propertyAge", "Property Age (Years)", NUMBER, "Property Details", 4, form_types=[POSITIVE]),
    field("propertyCondition", "Property Condition", SELECT, "Property Details", 5, form_types=[POSITIVE]),
    field("propertyArea", "Property Area", NUMBER, "Property Details", 6, form_types=[POSITIVE]),
    field("propertyValue", "Property Value", NUMBER, "Property Details", 7, form_types=[POSITIVE]),
    field("marketValue", "Market Value", NUMBER, "Property Details", 8, form_types=[POSITIVE]),

    # --- APF Details ---
    field("apfStatus", "APF Status", SELECT, "APF Details", 1, form_types=[POSITIVE]),
    field("apfNumber", "APF Number", TEXT, "APF Details", 2, form_types=[POSITIVE]),
    field("apfIssueDate", "APF Issue Date", DATE, "APF Details", 3, form_types=[POSITIVE]),
    field("apfExpiryDate", "APF Expiry Date", DATE, "APF Details", 4, form_types=[POSITIVE]),
    field("apfIssuingAuthority", "APF Issuing Authority", TEXT, "APF Details", 5, form_types=[POSITIVE]),
    field("apfValidityStatus", "APF Validity Status", SELECT, "APF Details", 6, form_types=[POSITIVE]),
    field("apfAmount", "APF Amount", NUMBER, "APF Details", 7, form_types=[POSITIVE]),
    field("apfUtilizedAmount", "APF Utilized Amount", NUMBER, "APF Details", 8, form_types=[POSITIVE]),
    field("apfBalanceAmount", "APF Balance Amount", NUMBER, "APF Details", 9, form_types=[POSITIVE]),

    # --- Project Details ---
    field("projectName", "Project Name", TEXT, "Project Details", 1, form_types=_PROJECT),
    field("builderName", "Builder Name", TEXT, "Project Details", 2, form_types=_PROJECT),
    field("projectStatus", "Project Status", SELECT, "Project Details", 3, form_types=[POSITIVE]),
    field("projectCompletionPercentage", "Project Completion %", NUMBER, "Project Details", 4, form_types=[POSITIVE]),
    field("totalUnits", "Total Units", NUMBER, "Project Details", 5, form_types=[POSITIVE]),
    field("completedUnits", "Completed Units", NUMBER, "Project Details", 6, form_types=[POSITIVE]),
    field("soldUnits", "Sold Units", NUMBER, "Project Details", 7, form_types=[POSITIVE]),
    field("reraRegistrationNumber", "RERA Registration Number", TEXT, "Project Details", 8, form_types=[POSITIVE]),

    # --- Loan Details ---
    field("loanAmount", "Loan Amount", NUMBER, "Loan Details", 1, form_types=[POSITIVE]),
    field("loanPurpose", "Loan Purpose", SELECT, "Loan Details", 2, form_types=[POSITIVE]),
    field("bankName", "Bank Name", TEXT, "Loan Details", 3, form_types=[POSITIVE]),
    field("emiAmount", "EMI Amount", NUMBER, "Loan Details", 4, form_types=[POSITIVE]),

    # --- Location Details ---
    *location_fields(restrict_rating=True),

    # --- Legal Status ---
    field("legalClearance", "Legal Clearance", SELECT, "Legal Status", 1, form_types=[POSITIVE]),
    field("titleClearance", "Title Clearance", SELECT, "Legal Status", 2, form_types=[POSITIVE]),
    field("encumbranceStatus", "Encumbrance Status", SELECT, "Legal Status", 3, form_types=[POSITIVE]),
    field("litigationStatus", "Litigation Status", SELECT, "Legal Status", 4, form_types=[POSITIVE]),

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

    # Property
    "propertyType": Mapped("property_type"),
    "propertyStatus": Mapped("property_status"),
    "propertyOwnership": Mapped("property_ownership"),
    "propertyAge": Mapped("property_age", INTEGER),
    "propertyCondition": Mapped("property_condition"),
    "propertyArea": Mapped("property_area", DECIMAL),
    "propertyValue": Mapped("property_value", DECIMAL),
    "marketValue": Mapped("market_value", DECIMAL),

    # APF
    "apfStatus": Mapped("apf_status"),
    "apfNumber": Mapped("apf_number"),
    "apfIssueDate": Mapped("apf_issue_date", DATE_KIND),
    "apfExpiryDate": Mapped("apf_expiry_date", DATE_KIND),
    "apfIssuingAuthority": Mapped("apf_issuing_authority"),
    "apfValidityStatus": Mapped("apf_validity_status"),
    "apfAmount": Mapped("apf_amount", DECIMAL),
    "apfUtilizedAmount": Mapped("apf_utilized_amount", DECIMAL),
    "apfBalanceAmount": Mapped("apf_balance_amount", DECIMAL),

    # Project
    "projectName": Mapped("project_name"),
    "projectStatus": Mapped("project_status"),
    "projectApprovalStatus": Mapped("project_approval_status"),
    "projectCompletionPercentage": Mapped("project_completion_percentage", INTEGER),
    "totalUnits": Mapped("total_units", INTEGER),
    "completedUnits": Mapped("completed_units", INTEGER),
    "soldUnits": Mapped("sold_units", INTEGER),
    "availableUnits": Mapped("available_units", INTEGER),
    "possessionStatus": Mapped("possession_status"),

    # Builder / developer
    "builderName": Mapped("builder_name"),
    "builderContact": Mapped("builder_contact"),
    "developerName": Mapped("developer_name"),
    "developerContact": Mapped("developer_contact"),
    "builderRegistrationNumber": Mapped("builder_registration_number"),
    "reraRegistrationNumber": Mapped("rera_registration_number"),

    # Loan
    "loanAmount": Mapped("loan_amount", DECIMAL),
    "loanPurpose": Mapped("loan_purpose"),
    "loanStatus": Mapped("loan_status"),
    "bankName": Mapped("bank_name"),
    "loanAccountNumber": Mapped("loan_account_number"),
    "emiAmount": Mapped("emi_amount", DECIMAL),

    # Met person and documents
    "metPersonName": Mapped("met_person_name"),
    "metPersonDesignation": Mapped("met_person_designation"),
    "metPersonRelation": Mapped("met_person_relation"),
    "metPersonContact": Mapped("met_person_contact"),
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

    # Legal and infrastructure
    "legalClearance": Mapped("legal_clearance"),
    "titleClearance": Mapped("title_clearance"),
    "encumbranceStatus": Mapped("encumbrance_status"),
    "litigationStatus": Mapped("litigation_status"),
    "infrastructureStatus": Mapped("infrastructure_status"),
    "roadConnectivity": Mapped("road_connectivity"),
    "propertyConcerns": Mapped("property_concerns"),
    "financialConcerns": Mapped("financial_concerns"),

    # Legacy names
    "metPerson": Mapped("met_person_name"),
    "companyName": Mapped("builder_name"),
    "projectDetails": Mapped("project_name"),
    "propertyDetails": Mapped("property_type"),
})


REQUIRED_FIELDS = {
    POSITIVE: [
        "addressLocatable", "addressRating", "propertyType", "propertyStatus",
        "metPersonName", "metPersonDesignation", "projectName", "builderName",
        "apfStatus", "propertyValue", "locality", "addressStructure", *AREA_REQUIRED,
    ],
    SHIFTED: [
        "addressLocatable", "addressRating", "metPersonName", "metPersonDesignation",
        "shiftedPeriod", "currentLocation", "locality", "addressStructure", *AREA_REQUIRED,
    ],
    NSP: [
        "addressLocatable", "addressRating", "metPersonName", "metPersonDesignation",
        "projectName", "builderName", "propertyType", "locality", "addressStructure",
        *AREA_REQUIRED,
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
        when="apfStatus", equals="Available", then="apfNumber",
        message="apfNumber should be specified when APF is available",
    ),
    ConditionalRule(
        when="apfStatus", equals="Available", then="apfValidityStatus",
        message="apfValidityStatus should be specified when APF is available",
    ),
    TPC_RULE,
    ConditionalRule(when="totalUnits", then="completedUnits"),
    ConditionalRule(when="loanAmount", then="bankName"),
]

PREPARE_RULES = [
    ConditionalRule(
        when="apfStatus", equals="Active", then="apfExpiryDate",
        message="apfExpiryDate should be specified when APF status is Active",
    ),
    PROPERTY_VALUE_RULE,
    ConditionalRule(
        when="loanAmount", then="bankName",
        message="bankName should be specified when loan amount is provided",
    ),
    RangeRule(
        field="propertyAge", minimum=0, maximum=200,
        message="propertyAge should be between 0 and 200 years",
    ),
    ComparisonRule(
        left="apfAmount", op=">", right="propertyValue",
        message="apfAmount should not exceed propertyValue",
    ),
    TPC_SELECTED_RULE,
    PROPERTY_AREA_RULE,
    ComparisonRule(
        left="apfExpiryDate", op="<=", right="apfIssueDate",
        message="apfExpiryDate should be after apfIssueDate",
    ),
    ConditionalRule(
        when="occupancyStatus", equals="Tenant", then="tenantDetails",
        message="tenantDetails should be specified when occupancy status is Tenant",
    ),
    PROPERTY_NOT_FOUND_RULE,
    HOLD_RULE,
]


SCHEMA = VerificationSchema(
    verification_type=VerificationType.PROPERTY_APF,
    table_name="propertyApfVerificationReports",
    fields=FIELDS,
    mapping=MAPPING,
    required_fields=REQUIRED_FIELDS,
    conditional_rules=CONDITIONAL_RULES,
    prepare_rules=PREPARE_RULES,
    aliases=("PROPERTY-APF",),
    detection_indicators=indicators(
        positive=["apfNumber", "apfStatus", "propertyValue", "projectName", "builderName"],
        shifted=["shiftedPeriod", "currentLocation", "premisesStatus", "propertyShifted"],
        nsp=["apfStatus", "temporaryApf", "conditionalApf"],
        entry_restricted=["entryRestrictionReason", "securityPersonName", "propertyRestricted"],
        untraceable=["callRemark", "contactPerson", "propertyCancelled", "apfUntraceable"],
    ),
)
