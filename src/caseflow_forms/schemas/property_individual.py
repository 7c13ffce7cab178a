"""
Property (individual) verification: a privately owned property and its owner.
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
    CONTACT_NUMBER_RULE,
    DECIMAL,
    DERIVED_IGNORED,
    ENTRY_RESTRICTED,
    EXTRA_LANDMARK_MAPPING,
    HOLD_RULE,
    INTEGER,
    MULTISELECT,
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


_OWNER = [POSITIVE, NSP]

FIELDS = [
    # --- Basic Information ---
    field("customerName", "Customer Name", TEXT, "Basic Information", 1, True),
    field("outcome", "Verification Outcome", SELECT, "Basic Information", 2, True),
    field("metPersonName", "Met Person Name", TEXT, "Basic Information", 3),
    field("metPersonRelation", "Met Person Relation", SELECT, "Basic Information", 4),

    # --- Property Details ---
    field("propertyType", "Property Type", SELECT, "Property Details", 1, form_types=_OWNER),
    field("propertyStatus", "Property Status", SELECT, "Property Details", 2, form_types=[POSITIVE]),
    field("propertyOwnership", "Property Ownership", SELECT, "Property Details", 3, form_types=[POSITIVE]),
    field("propertyAge", "Property Age (Years)", NUMBER, "Property Details", 4, form_types=[POSITIVE]),
    field("propertyCondition", "Property Condition", SELECT, "Property Details", 5, form_types=[POSITIVE]),
    field("constructionType", "Construction Type", SELECT, "Property Details", 6, form_types=[POSITIVE]),
    field("propertyArea", "Property Area", NUMBER, "Property Details", 7, form_types=[POSITIVE]),
    field("propertyValue", "Property Value", NUMBER, "Property Details", 8, form_types=[POSITIVE]),
    field("marketValue", "Market Value", NUMBER, "Property Details", 9, form_types=[POSITIVE]),

    # --- Owner Details ---
    field("ownerName", "Owner Name", TEXT, "Owner Details", 1, form_types=_OWNER),
    field("ownerRelation", "Owner Relation", SELECT, "Owner Details", 2, form_types=[POSITIVE]),
    field("ownerAge", "Owner Age", NUMBER, "Owner Details", 3, form_types=[POSITIVE]),
    field("ownerOccupation", "Owner Occupation", TEXT, "Owner Details", 4, form_types=[POSITIVE]),
    field("ownerIncome", "Owner Income", NUMBER, "Owner Details", 5, form_types=[POSITIVE]),
    field("yearsOfResidence", "Years of Residence", NUMBER, "Owner Details", 6, form_types=[POSITIVE]),
    field("familyMembers", "Family Members", NUMBER, "Owner Details", 7, form_types=[POSITIVE]),
    field("earningMembers", "Earning Members", NUMBER, "Owner Details", 8, form_types=[POSITIVE]),

    # --- Documents ---
    field("propertyDocuments", "Property Documents", MULTISELECT, "Documents", 1, form_types=[POSITIVE]),
    field("documentVerificationStatus", "Document Verification Status", SELECT, "Documents", 2, form_types=[POSITIVE]),
    field("titleClearStatus", "Title Clear Status", SELECT, "Documents", 3, form_types=[POSITIVE]),
    field("mutationStatus", "Mutation Status", SELECT, "Documents", 4, form_types=[POSITIVE]),
    field("taxPaymentStatus", "Tax Payment Status", SELECT, "Documents", 5, form_types=[POSITIVE]),
    field("loanAgainstProperty", "Loan Against Property", SELECT, "Documents", 6, form_types=[POSITIVE]),
    field("bankName", "Bank Name", TEXT, "Documents", 7, form_types=[POSITIVE]),
    field("loanAmount", "Loan Amount", NUMBER, "Documents", 8, form_types=[POSITIVE]),

    # --- Location Details ---
    *location_fields(restrict_rating=True),

    # --- Neighbour Verification ---
    field("neighbor1Name", "Neighbour 1 Name", TEXT, "Neighbour Verification", 1, form_types=[POSITIVE]),
    field("neighbor1Confirmation", "Neighbour 1 Confirmation", SELECT, "Neighbour Verification", 2, form_types=[POSITIVE]),
    field("neighbor2Name", "Neighbour 2 Name", TEXT, "Neighbour Verification", 3, form_types=[POSITIVE]),
    field("neighbor2Confirmation", "Neighbour 2 Confirmation", SELECT, "Neighbour Verification", 4, form_types=[POSITIVE]),
    field("localityReputation", "Locality Reputation", SELECT, "Neighbour Verification", 5, form_types=[POSITIVE]),

    # --- Third Party Confirmation ---
    *tpc_fields(),

    # --- Shifting Details (SHIFTED) ---
    field("shiftedPeriod", "Shifted Period", TEXT, "Shifting Details", 1, form_types=[SHIFTED]),
    field("currentLocation", "Current Location", TEXT, "Shifting Details", 2, form_types=[SHIFTED]),
    field("previousOwnerName", "Previous Owner Name", TEXT, "Shifting Details", 3, form_types=[SHIFTED]),
    field("premisesStatus", "Premises Status", SELECT, "Shifting Details", 4, form_types=[SHIFTED]),

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
    "constructionType": Mapped("construction_type"),
    "propertyArea": Mapped("property_area", DECIMAL),
    "propertyValue": Mapped("property_value", DECIMAL),
    "marketValue": Mapped("market_value", DECIMAL),

    # Owner
    "ownerName": Mapped("owner_name"),
    "ownerRelation": Mapped("owner_relation"),
    "ownerAge": Mapped("owner_age", INTEGER),
    "ownerOccupation": Mapped("owner_occupation"),
    "ownerIncome": Mapped("owner_income", DECIMAL),
    "yearsOfResidence": Mapped("years_of_residence", INTEGER),
    "familyMembers": Mapped("family_members", INTEGER),
    "earningMembers": Mapped("earning_members", INTEGER),

    # Documents and legal
    "propertyDocuments": Mapped("property_documents"),
    "documentVerificationStatus": Mapped("document_verification_status"),
    "titleClearStatus": Mapped("title_clear_status"),
    "mutationStatus": Mapped("mutation_status"),
    "taxPaymentStatus": Mapped("tax_payment_status"),
    "legalIssues": Mapped("legal_issues"),
    "loanAgainstProperty": Mapped("loan_against_property"),
    "bankName": Mapped("bank_name"),
    "loanAmount": Mapped("loan_amount", DECIMAL),
    "emiAmount": Mapped("emi_amount", DECIMAL),

    # Met person and neighbours
    "metPersonName": Mapped("met_person_name"),
    "metPersonDesignation": Mapped("met_person_designation"),
    "metPersonRelation": Mapped("met_person_relation"),
    "metPersonContact": Mapped("met_person_contact"),
    "neighbor1Name": Mapped("neighbor1_name"),
    "neighbor1Confirmation": Mapped("neighbor1_confirmation"),
    "neighbor2Name": Mapped("neighbor2_name"),
    "neighbor2Confirmation": Mapped("neighbor2_confirmation"),
    "localityReputation": Mapped("locality_reputation"),

    # Shifted / entry restricted
    "shiftedPeriod": Mapped("shifted_period"),
    "currentLocation": Mapped("current_location"),
    "premisesStatus": Mapped("premises_status"),
    "previousOwnerName": Mapped("previous_owner_name"),
    "entryRestrictionReason": Mapped("entry_restriction_reason"),
    "securityPersonName": Mapped("security_person_name"),
    "securityConfirmation": Mapped("security_confirmation"),

    # Utilities and infrastructure
    "electricityConnection": Mapped("electricity_connection"),
    "waterConnection": Mapped("water_connection"),
    "gasConnection": Mapped("gas_connection"),
    "internetConnection": Mapped("internet_connection"),
    "roadConnectivity": Mapped("road_connectivity"),
    "publicTransport": Mapped("public_transport"),
    "infrastructureStatus": Mapped("infrastructure_status"),
    "safetySecurity": Mapped("safety_security"),
    "propertyConcerns": Mapped("property_concerns"),
    "verificationChallenges": Mapped("verification_challenges"),

    # Legacy names
    "metPerson": Mapped("met_person_name"),
    "propertyOwner": Mapped("owner_name"),
    "propertyDetails": Mapped("property_type"),
    "neighborFeedback": Mapped("feedback_from_neighbour"),
})


REQUIRED_FIELDS = {
    POSITIVE: [
        "addressLocatable", "addressRating", "propertyType", "propertyStatus",
        "propertyOwnership", "ownerName", "ownerRelation", "metPersonName",
        "metPersonRelation", "familyMembers", "locality", "addressStructure",
        *AREA_REQUIRED,
    ],
    SHIFTED: [
        "addressLocatable", "addressRating", "metPersonName", "metPersonRelation",
        "shiftedPeriod", "currentLocation", "previousOwnerName", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    NSP: [
        "addressLocatable", "addressRating", "metPersonName", "metPersonRelation",
        "ownerName", "propertyType", "locality", "addressStructure", *AREA_REQUIRED,
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
        when="propertyOwnership", equals="Self Owned", then="propertyDocuments",
        message="propertyDocuments should be specified for self-owned property",
    ),
    ConditionalRule(
        when="loanAgainstProperty", equals="Yes", then="bankName",
        message="bankName should be specified when loan against property exists",
    ),
    TPC_RULE,
    ConditionalRule(when="familyMembers", then="earningMembers"),
]

PREPARE_RULES = [
    RangeRule(
        field="individualAge", minimum=18, maximum=100,
        message="individualAge should be between 18 and 100 years",
    ),
    ComparisonRule(
        left="monthlyIncome", left_factor=12, op="!=", right="annualIncome",
        message="annualIncome should be 12 times monthlyIncome",
    ),
    ComparisonRule(
        left="earningMembers", op=">", right="familyMembers",
        message="earningMembers should not exceed familyMembers",
    ),
    ConditionalRule(
        when="employmentType", equals="Salaried", then="employerName",
        message="employerName should be specified for salaried individuals",
    ),
    ConditionalRule(
        when="employmentType", equals="Business", then="businessName",
        message="businessName should be specified for business individuals",
    ),
    PROPERTY_VALUE_RULE,
    ConditionalRule(
        when="loanAmount", then="loanPurpose",
        message="loanPurpose should be specified when loan amount is provided",
    ),
    CONTACT_NUMBER_RULE,
    TPC_SELECTED_RULE,
    ConditionalRule(when="reference1Name", then="reference1Contact"),
    PROPERTY_AREA_RULE,
    PROPERTY_NOT_FOUND_RULE,
    HOLD_RULE,
]


SCHEMA = VerificationSchema(
    verification_type=VerificationType.PROPERTY_INDIVIDUAL,
    table_name="propertyIndividualVerificationReports",
    fields=FIELDS,
    mapping=MAPPING,
    required_fields=REQUIRED_FIELDS,
    conditional_rules=CONDITIONAL_RULES,
    prepare_rules=PREPARE_RULES,
    aliases=("PROPERTY-INDIVIDUAL",),
    detection_indicators=indicators(
        positive=["ownerName", "propertyType", "propertyValue", "ownershipStatus", "familyMembers"],
        shifted=["shiftedPeriod", "currentLocation", "premisesStatus", "ownerShifted"],
        nsp=["ownershipStatus", "temporaryOwnership", "disputedProperty"],
        entry_restricted=["entryRestrictionReason", "securityPersonName", "propertyLocked"],
        untraceable=["callRemark", "contactPerson", "ownerUntraceable", "propertyAbandoned"],
    ),
)
