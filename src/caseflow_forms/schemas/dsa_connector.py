"""
DSA / DST connector verification: a direct selling agent's office and the
business it runs for the lender.

Connector reports are stored in a wide table with many columns the field
form never sends (network, compliance and training data filled in by other
workflows), so the schema lists them explicitly together with a
per-outcome relevance list.
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


_CONNECTOR = [POSITIVE, NSP]

FIELDS = [
    # --- Basic Information ---
    field("customerName", "Customer Name", TEXT, "Basic Information", 1, True),
    field("outcome", "Verification Outcome", SELECT, "Basic Information", 2, True),
    field("metPersonName", "Met Person Name", TEXT, "Basic Information", 3),
    field("metPersonDesignation", "Met Person Designation", TEXT, "Basic Information", 4),

    # --- Connector Details ---
    field("connectorType", "Connector Type", SELECT, "Connector Details", 1, form_types=[POSITIVE]),
    field("connectorCode", "Connector Code", TEXT, "Connector Details", 2, form_types=[POSITIVE]),
    field("connectorName", "Connector Name", TEXT, "Connector Details", 3, form_types=_CONNECTOR),
    field("connectorDesignation", "Connector Designation", TEXT, "Connector Details", 4, form_types=[POSITIVE]),
    field("connectorExperience", "Connector Experience (Years)", NUMBER, "Connector Details", 5, form_types=[POSITIVE]),
    field("connectorStatus", "Connector Status", SELECT, "Connector Details", 6, form_types=_CONNECTOR),

    # --- Business Details ---
    field("businessName", "Business Name", TEXT, "Business Details", 1, form_types=_CONNECTOR),
    field("businessType", "Business Type", SELECT, "Business Details", 2, form_types=[POSITIVE]),
    field("businessRegistrationNumber", "Business Registration Number", TEXT, "Business Details", 3, form_types=[POSITIVE]),
    field("businessEstablishmentYear", "Business Establishment Year", NUMBER, "Business Details", 4, form_types=[POSITIVE]),
    field("officeType", "Office Type", SELECT, "Business Details", 5, form_types=[POSITIVE]),
    field("officeArea", "Office Area", NUMBER, "Business Details", 6, form_types=[POSITIVE]),
    field("totalStaff", "Total Staff", NUMBER, "Business Details", 7, form_types=[POSITIVE]),
    field("salesStaff", "Sales Staff", NUMBER, "Business Details", 8, form_types=[POSITIVE]),
    field("monthlyBusinessVolume", "Monthly Business Volume", NUMBER, "Business Details", 9, form_types=[POSITIVE]),
    field("businessOperational", "Business Operational", SELECT, "Business Details", 10, form_types=[POSITIVE]),

    # --- Licence & Compliance ---
    field("licenseStatus", "License Status", SELECT, "Licence & Compliance", 1, form_types=[POSITIVE]),
    field("licenseNumber", "License Number", TEXT, "Licence & Compliance", 2, form_types=[POSITIVE]),
    field("licenseExpiryDate", "License Expiry Date", DATE, "Licence & Compliance", 3, form_types=[POSITIVE]),
    field("complianceStatus", "Compliance Status", SELECT, "Licence & Compliance", 4, form_types=[POSITIVE]),

    # --- Location Details ---
    *location_fields(restrict_rating=True),

    # --- Third Party Confirmation ---
    *tpc_fields(),

    # --- Shifting Details (SHIFTED) ---
    field("shiftedPeriod", "Shifted Period", TEXT, "Shifting Details", 1, form_types=[SHIFTED]),
    field("currentLocation", "Current Location", TEXT, "Shifting Details", 2, form_types=[SHIFTED]),
    field("previousBusinessName", "Previous Business Name", TEXT, "Shifting Details", 3, form_types=[SHIFTED]),
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

    # Connector
    "connectorType": Mapped("connector_type"),
    "connectorCode": Mapped("connector_code"),
    "connectorName": Mapped("connector_name"),
    "connectorDesignation": Mapped("connector_designation"),
    "connectorExperience": Mapped("connector_experience", INTEGER),
    "connectorStatus": Mapped("connector_status"),

    # Business
    "businessName": Mapped("business_name"),
    "businessType": Mapped("business_type"),
    "businessRegistrationNumber": Mapped("business_registration_number"),
    "businessEstablishmentYear": Mapped("business_establishment_year", INTEGER),
    "officeType": Mapped("office_type"),
    "officeArea": Mapped("office_area", DECIMAL),
    "officeRent": Mapped("office_rent", DECIMAL),

    # Staff and volumes
    "totalStaff": Mapped("total_staff", INTEGER),
    "salesStaff": Mapped("sales_staff", INTEGER),
    "supportStaff": Mapped("support_staff", INTEGER),
    "teamSize": Mapped("team_size", INTEGER),
    "monthlyBusinessVolume": Mapped("monthly_business_volume", DECIMAL),
    "averageMonthlySales": Mapped("average_monthly_sales", DECIMAL),
    "annualTurnover": Mapped("annual_turnover", DECIMAL),
    "monthlyIncome": Mapped("monthly_income", DECIMAL),
    "commissionStructure": Mapped("commission_structure"),
    "paymentTerms": Mapped("payment_terms"),
    "bankAccountDetails": Mapped("bank_account_details"),

    # Technology
    "computerSystems": Mapped("computer_systems", INTEGER),
    "internetConnection": Mapped("internet_connection"),
    "softwareSystems": Mapped("software_systems"),
    "posTerminals": Mapped("pos_terminals", INTEGER),
    "printerScanner": Mapped("printer_scanner"),

    # Licence and compliance
    "licenseStatus": Mapped("license_status"),
    "licenseNumber": Mapped("license_number"),
    "licenseExpiryDate": Mapped("license_expiry_date", DATE_KIND),
    "complianceStatus": Mapped("compliance_status"),
    "auditStatus": Mapped("audit_status"),
    "trainingStatus": Mapped("training_status"),

    # Met person and operations
    "metPersonName": Mapped("met_person_name"),
    "metPersonDesignation": Mapped("met_person_designation"),
    "metPersonRelation": Mapped("met_person_relation"),
    "metPersonContact": Mapped("met_person_contact"),
    "businessOperational": Mapped("business_operational"),
    "customerFootfall": Mapped("customer_footfall"),
    "businessHours": Mapped("business_hours"),
    "weekendOperations": Mapped("weekend_operations"),

    # Shifted / entry restricted
    "shiftedPeriod": Mapped("shifted_period"),
    "currentLocation": Mapped("current_location"),
    "premisesStatus": Mapped("premises_status"),
    "previousBusinessName": Mapped("previous_business_name"),
    "entryRestrictionReason": Mapped("entry_restriction_reason"),
    "securityPersonName": Mapped("security_person_name"),
    "securityConfirmation": Mapped("security_confirmation"),

    # Market and assessment
    "marketPresence": Mapped("market_presence"),
    "competitorAnalysis": Mapped("competitor_analysis"),
    "marketReputation": Mapped("market_reputation"),
    "customerFeedback": Mapped("customer_feedback"),
    "infrastructureStatus": Mapped("infrastructure_status"),
    "commercialViability": Mapped("commercial_viability"),
    "businessConcerns": Mapped("business_concerns"),
    "operationalChallenges": Mapped("operational_challenges"),
    "growthPotential": Mapped("growth_potential"),
    "riskAssessment": Mapped("risk_assessment"),

    # Legacy names
    "metPerson": Mapped("met_person_name"),
    "companyName": Mapped("business_name"),
    "agentName": Mapped("connector_name"),
    "agentCode": Mapped("connector_code"),
})


# Columns of dsaConnectorVerificationReports the form has no key for
EXTRA_COLUMNS = [
    "connector_category", "connector_level", "connector_territory", "connector_target",
    "connector_achievement", "connector_rating", "connector_training_status",
    "connector_certification", "connector_license_number",
    "office_status", "office_ownership", "office_facilities", "office_staff_count",
    "office_equipment", "incentive_details", "outstanding_dues", "credit_limit",
    "security_deposit", "pan_number", "gst_number", "tax_compliance_status",
    "sub_agents_count", "network_coverage", "territory_details", "customer_base",
    "active_policies", "renewal_rate", "claim_ratio", "training_completed",
    "certification_status", "skill_assessment", "product_knowledge",
    "compliance_training", "technology_adoption", "digital_literacy",
    "contact_number", "alternate_number", "email_address", "communication_preference",
    "availability_hours", "response_time", "customer_feedback_score",
    "designation", "met_person_status", "document_shown", "document_type",
    "document_verification_status", "identity_verification", "address_verification",
    "business_verification", "computer_literacy", "internet_connectivity",
    "mobile_app_usage", "digital_tools", "pos_machine_availability",
    "printer_availability", "scanner_availability", "regulatory_compliance",
    "code_of_conduct_adherence", "ethical_practices", "customer_grievance_handling",
    "data_protection_compliance", "anti_fraud_measures", "name_of_met_person",
    "met_person_type", "met_person_confirmation",
]

_AREA_RELEVANT = [
    "locality", "address_structure", "political_connection", "dominated_area",
    "feedback_from_neighbour", "other_observation", "final_status",
]

RELEVANT_COLUMNS = {
    POSITIVE: [
        "address_locatable", "address_rating", "connector_type", "connector_code",
        "connector_name", "connector_designation", "connector_experience", "connector_status",
        "business_name", "business_type", "business_registration_number", "office_type",
        "office_area", "monthly_business_volume", "team_size", "training_completed",
        "contact_number", "met_person_name", "designation", "document_shown", "document_type",
        *_AREA_RELEVANT,
        "address_floor", "address_structure_color", "door_color", "landmark1", "landmark2",
        "tpc_met_person1", "tpc_name1", "tpc_confirmation1", "annual_turnover",
        "commission_structure", "bank_account_details", "pan_number", "certification_status",
    ],
    SHIFTED: [
        "address_locatable", "address_rating", "met_person_name", "designation",
        "shifted_period", "current_location", *_AREA_RELEVANT,
        "address_floor", "address_structure_color", "door_color", "landmark1", "landmark2",
    ],
    NSP: [
        "address_locatable", "address_rating", "connector_status", "met_person_name",
        "designation", *_AREA_RELEVANT,
        "address_floor", "address_structure_color", "door_color", "landmark1", "landmark2",
    ],
    ENTRY_RESTRICTED: [
        "address_locatable", "address_rating", "name_of_met_person", "met_person_type",
        "met_person_confirmation", *_AREA_RELEVANT,
        "address_floor", "address_structure_color", "landmark1", "landmark2",
    ],
    UNTRACEABLE: [
        "call_remark", "contact_person", "locality", "landmark1", "landmark2", "landmark3",
        "landmark4", "dominated_area", "other_observation", "final_status",
    ],
}


REQUIRED_FIELDS = {
    POSITIVE: [
        "addressLocatable", "addressRating", "connectorType", "connectorName",
        "connectorCode", "businessName", "businessType", "metPersonName",
        "metPersonDesignation", "businessOperational", "locality", "addressStructure",
        *AREA_REQUIRED,
    ],
    SHIFTED: [
        "addressLocatable", "addressRating", "metPersonName", "metPersonDesignation",
        "shiftedPeriod", "currentLocation", "previousBusinessName", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    NSP: [
        "addressLocatable", "addressRating", "metPersonName", "metPersonDesignation",
        "connectorName", "businessName", "locality", "addressStructure", *AREA_REQUIRED,
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
        when="connectorType", equals="DSA", then="connectorCode",
        message="connectorCode should be specified for DSA connector type",
    ),
    ConditionalRule(
        when="businessType", equals="Company", then="businessRegistrationNumber",
        message="businessRegistrationNumber should be specified for Company business type",
    ),
    TPC_RULE,
    ConditionalRule(when="totalStaff", then="salesStaff"),
    ConditionalRule(
        when="licenseStatus", equals="Valid", then="licenseNumber",
        message="licenseNumber should be specified when license status is Valid",
    ),
]

PREPARE_RULES = [
    RangeRule(
        field="connectorExperience", minimum=0, maximum=50,
        message="connectorExperience should be between 0 and 50 years",
    ),
    ComparisonRule(
        left="monthlyBusinessVolume", left_factor=12, op=">", right="annualTurnover", right_factor=1.2,
        message="monthlyBusinessVolume seems inconsistent with annualTurnover",
    ),
    ComparisonRule(
        left="subAgentsCount", op=">", right="teamSize",
        message="subAgentsCount should not exceed teamSize",
    ),
    CONTACT_NUMBER_RULE,
    ConditionalRule(
        when="businessType", equals="Registered", then="businessRegistrationNumber",
        message="businessRegistrationNumber should be specified for registered business",
    ),
    RangeRule(
        field="officeArea", minimum=1, maximum=50000,
        message="officeArea should be between 1 and 50000 sq ft",
    ),
    TPC_SELECTED_RULE,
    ConditionalRule(
        when="certificationStatus", equals="Certified", then="trainingCompleted",
        message="trainingCompleted should be specified when certification status is Certified",
    ),
    ComparisonRule(
        left="outstandingDues", op=">", right="creditLimit",
        message="outstandingDues should not exceed creditLimit",
    ),
    ConditionalRule(
        when="connectorStatus", equals="Inactive", then="otherObservation", form_type=NSP,
        message="otherObservation should be specified when connector status is Inactive",
    ),
    HOLD_RULE,
]


SCHEMA = VerificationSchema(
    verification_type=VerificationType.DSA_CONNECTOR,
    table_name="dsaConnectorVerificationReports",
    fields=FIELDS,
    mapping=MAPPING,
    required_fields=REQUIRED_FIELDS,
    conditional_rules=CONDITIONAL_RULES,
    prepare_rules=PREPARE_RULES,
    extra_columns=EXTRA_COLUMNS,
    relevant_columns=RELEVANT_COLUMNS,
    aliases=("DSA-CONNECTOR", "DSA/DST CONNECTOR"),
    detection_indicators=indicators(
        positive=["connectorName", "connectorCode", "businessName", "licenseStatus", "monthlyBusinessVolume"],
        shifted=["shiftedPeriod", "currentLocation", "premisesStatus", "businessShifted"],
        nsp=["businessOperational", "temporaryBusiness", "connectorStatus"],
        entry_restricted=["entryRestrictionReason", "securityPersonName", "officeRestricted"],
        untraceable=["callRemark", "contactPerson", "businessClosed", "connectorUntraceable"],
    ),
)
