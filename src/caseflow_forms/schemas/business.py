"""
Business verification: the applicant's own shop, firm or company premises.
"""

from caseflow_forms.models.enums import VerificationType
from caseflow_forms.models.mapping import (
    IGNORED,
    ConditionalRule,
    FieldMappingTable,
    Mapped,
    VerificationSchema,
)
from caseflow_forms.schemas.common import (
    AREA_MAPPING,
    AREA_REQUIRED,
    BASE_MAPPING,
    DECIMAL,
    DERIVED_IGNORED,
    ENTRY_RESTRICTED,
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
    met_person_entry_fields,
    tpc_fields,
    untraceable_fields,
)


FIELDS = [
    # --- Basic Information ---
    field("customerName", "Customer Name", TEXT, "Basic Information", 1, True),
    field("outcome", "Verification Outcome", SELECT, "Basic Information", 2, True),
    field("metPersonName", "Met Person Name", TEXT, "Basic Information", 3),
    field("businessName", "Business Name", TEXT, "Basic Information", 4),

    # --- Business Details ---
    field("businessStatus", "Business Status", SELECT, "Business Details", 1),
    field("businessType", "Business Type", SELECT, "Business Details", 2),
    field("businessNatureOfBusiness", "Nature of Business", TEXT, "Business Details", 3),
    field("businessPeriod", "Business Period", TEXT, "Business Details", 4),
    field("staffStrength", "Staff Strength", NUMBER, "Business Details", 5),
    field("businessExistence", "Business Existence", SELECT, "Business Details", 6),
    field("applicantExistence", "Applicant Existence", SELECT, "Business Details", 7),
    field("nameOfCompanyOwners", "Name of Company Owners", TEXT, "Business Details", 8, form_types=[POSITIVE]),
    field("ownershipType", "Ownership Type", SELECT, "Business Details", 9, form_types=[POSITIVE]),
    field("addressStatus", "Address Status", SELECT, "Business Details", 10, form_types=[POSITIVE]),
    field("staffSeen", "Staff Seen", NUMBER, "Business Details", 11, form_types=[POSITIVE]),

    # --- Location Details ---
    field("addressLocatable", "Address Locatable", SELECT, "Location Details", 1, True),
    field("addressRating", "Address Rating", SELECT, "Location Details", 2, True),
    field("locality", "Locality Type", SELECT, "Location Details", 3),
    field("addressStructure", "Address Structure", SELECT, "Location Details", 4),
    field("premisesStatus", "Premises Status", SELECT, "Location Details", 5),
    field("landmark1", "Landmark 1", TEXT, "Location Details", 6),
    field("landmark2", "Landmark 2", TEXT, "Location Details", 7),

    # --- Third Party Confirmation ---
    *tpc_fields(),

    # --- Shifting Details (SHIFTED) ---
    field("currentCompanyName", "Current Company Name", TEXT, "Shifting Details", 1, form_types=[SHIFTED]),
    field("oldBusinessShiftedPeriod", "Old Business Shifted Period", TEXT, "Shifting Details", 2, form_types=[SHIFTED]),
    field("currentCompanyPeriod", "Current Company Period", TEXT, "Shifting Details", 3, form_types=[SHIFTED]),

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
    **TPC_MAPPING,
    **UNTRACEABLE_MAPPING,
    **AREA_MAPPING,
    "companyNamePlateStatus": Mapped("company_nameplate_status"),
    "nameOnBoard": Mapped("name_on_company_board"),
    "nameOnCompanyBoard": Mapped("name_on_company_board"),

    # Business status and details
    "businessStatus": Mapped("business_status"),
    "businessExistance": Mapped("business_existence"),  # misspelt by older mobile builds
    "businessExistence": Mapped("business_existence"),
    "businessType": Mapped("business_type"),
    "ownershipType": Mapped("ownership_type"),
    "addressStatus": Mapped("address_status"),
    "companyNatureOfBusiness": Mapped("company_nature_of_business"),
    "businessPeriod": Mapped("business_period"),
    "establishmentPeriod": Mapped("establishment_period"),
    "businessApproxArea": Mapped("business_approx_area", DECIMAL),
    "officeApproxArea": Mapped("business_approx_area", DECIMAL),
    "staffStrength": Mapped("staff_strength", INTEGER),
    "staffSeen": Mapped("staff_seen", INTEGER),
    "businessAddress": Mapped("full_address"),
    "employeeCount": Mapped("staff_strength", INTEGER),
    "operatingHours": IGNORED,

    # Owner / person details
    "metPerson": Mapped("met_person_name"),
    "metPersonName": Mapped("met_person_name"),
    "designation": Mapped("designation"),
    "nameOfCompanyOwners": Mapped("name_of_company_owners"),
    "ownerName": Mapped("owner_name"),
    "businessOwnerName": Mapped("business_owner_name"),
    "documentShown": Mapped("document_shown"),

    # Shifted / entry restricted
    "shiftedPeriod": Mapped("shifted_period"),
    "oldBusinessShiftedPeriod": Mapped("old_business_shifted_period"),
    "currentCompanyName": Mapped("current_company_name"),
    "currentCompanyPeriod": Mapped("current_company_period"),
    "premisesStatus": Mapped("premises_status"),
    "nameOfMetPerson": Mapped("name_of_met_person"),
    "metPersonType": Mapped("met_person_type"),
    "metPersonConfirmation": Mapped("met_person_confirmation"),
    "applicantWorkingStatus": Mapped("applicant_working_status"),
    "otherExtraRemark": Mapped("other_extra_remark"),

    # Legacy names
    "businessName": Mapped("company_nature_of_business"),
    "companyName": Mapped("company_nature_of_business"),
    "totalEmployees": Mapped("staff_strength", INTEGER),
    "businessNature": Mapped("company_nature_of_business"),
})


REQUIRED_FIELDS = {
    POSITIVE: [
        "addressLocatable", "addressRating", "businessStatus", "metPerson",
        "designation", "businessType", "nameOfCompanyOwners", "ownershipType",
        "addressStatus", "companyNatureOfBusiness", "businessPeriod", "staffStrength",
        "locality", "addressStructure", *AREA_REQUIRED,
    ],
    SHIFTED: [
        "addressLocatable", "addressRating", "businessStatus", "metPerson",
        "designation", "currentCompanyName", "oldBusinessShiftedPeriod", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    NSP: [
        "addressLocatable", "addressRating", "businessStatus", "businessExistence",
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
        when="businessStatus", equals="Opened", then="staffSeen",
        message="staffSeen should be specified when business is opened",
    ),
    TPC_RULE,
]


SCHEMA = VerificationSchema(
    verification_type=VerificationType.BUSINESS,
    table_name="businessVerificationReports",
    fields=FIELDS,
    mapping=MAPPING,
    required_fields=REQUIRED_FIELDS,
    conditional_rules=CONDITIONAL_RULES,
    detection_indicators=indicators(
        positive=["businessName", "businessType", "licenseNumber", "annualTurnover", "customerFootfall"],
        shifted=["shiftedPeriod", "currentLocation", "premisesStatus", "previousBusinessAddress"],
        nsp=["businessOperational", "temporaryBusiness", "seasonalBusiness"],
        entry_restricted=["entryRestrictionReason", "securityPersonName", "restrictedAccess"],
        untraceable=["callRemark", "contactPerson", "businessClosed", "phoneNotReachable"],
    ),
)
