"""
Residence-cum-office verification: premises used both as a home and as a
place of work.

The storage table for this type is fixed, so the mapping is strict: keys
without an entry are dropped instead of being stored under their own name.
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
    DATE,
    DATE_KIND,
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


_TRACED_DETAILS = [POSITIVE, SHIFTED, NSP]

FIELDS = [
    # --- Basic Information ---
    field("customerName", "Customer Name", TEXT, "Basic Information", 1, True),
    field("outcome", "Verification Outcome", SELECT, "Basic Information", 2, True),
    field("metPersonName", "Met Person Name", TEXT, "Basic Information", 3, form_types=_TRACED_DETAILS),
    field("metPersonRelation", "Met Person Relation", SELECT, "Basic Information", 4, form_types=_TRACED_DETAILS),
    field("designation", "Designation", TEXT, "Basic Information", 5, form_types=_TRACED_DETAILS),

    # --- Residence Details ---
    field("houseStatus", "House Status", SELECT, "Residence Details", 1, form_types=_TRACED_DETAILS),
    field("totalFamilyMembers", "Total Family Members", NUMBER, "Residence Details", 2, form_types=[POSITIVE]),
    field("totalEarning", "Total Earning", NUMBER, "Residence Details", 3, form_types=[POSITIVE]),
    field("applicantDob", "Applicant Date of Birth", DATE, "Residence Details", 4, form_types=[POSITIVE]),
    field("applicantAge", "Applicant Age", NUMBER, "Residence Details", 5, form_types=[POSITIVE]),
    field("stayingPeriod", "Staying Period", TEXT, "Residence Details", 6, form_types=[POSITIVE]),
    field("stayingStatus", "Staying Status", SELECT, "Residence Details", 7, form_types=[POSITIVE]),
    field("approxArea", "Approx Area (Sq. Feet)", NUMBER, "Residence Details", 8, form_types=[POSITIVE]),
    field("documentShownStatus", "Document Shown Status", SELECT, "Residence Details", 9, form_types=[POSITIVE]),
    field("documentType", "Document Type", SELECT, "Residence Details", 10, form_types=[POSITIVE]),

    # --- Office Details ---
    field("officeStatus", "Office Status", SELECT, "Office Details", 1, form_types=_TRACED_DETAILS),
    field("officeType", "Office Type", SELECT, "Office Details", 2, form_types=[POSITIVE]),
    field("applicantDesignation", "Applicant Designation", TEXT, "Office Details", 3, form_types=[POSITIVE]),
    field("workingPeriod", "Working Period", TEXT, "Office Details", 4, form_types=[POSITIVE]),
    field("workingStatus", "Working Status", SELECT, "Office Details", 5, form_types=[POSITIVE]),
    field("applicantWorkingPremises", "Applicant Working Premises", SELECT, "Office Details", 6, form_types=[POSITIVE]),
    field("sittingLocation", "Sitting Location", TEXT, "Office Details", 7, form_types=[POSITIVE]),
    field("companyNatureOfBusiness", "Company Nature of Business", TEXT, "Office Details", 8, form_types=[POSITIVE]),
    field("businessPeriod", "Business Period", TEXT, "Office Details", 9, form_types=[POSITIVE]),
    field("establishmentPeriod", "Establishment Period", TEXT, "Office Details", 10, form_types=[POSITIVE]),
    field("staffStrength", "Staff Strength", NUMBER, "Office Details", 11, form_types=[POSITIVE]),
    field("staffSeen", "Staff Seen", NUMBER, "Office Details", 12, form_types=[POSITIVE]),

    # --- Location Details ---
    *location_fields(restrict_rating=True),
    field("companyNamePlateStatus", "Company Name Plate Status", SELECT, "Location Details", 12, form_types=_TRACED_DETAILS),
    field("nameOnCompanyBoard", "Name on Company Board", TEXT, "Location Details", 13, form_types=_TRACED_DETAILS),
    field("doorNamePlateStatus", "Door Name Plate Status", SELECT, "Location Details", 14, form_types=_TRACED_DETAILS),
    field("nameOnDoorPlate", "Name on Door Plate", TEXT, "Location Details", 15, form_types=_TRACED_DETAILS),
    field("societyNamePlateStatus", "Society Name Plate Status", SELECT, "Location Details", 16, form_types=_TRACED_DETAILS),
    field("nameOnSocietyBoard", "Name on Society Board", TEXT, "Location Details", 17, form_types=_TRACED_DETAILS),

    # --- Third Party Confirmation ---
    *tpc_fields(),

    # --- Shifting Details (SHIFTED) ---
    field("currentCompanyName", "Current Company Name", TEXT, "Shifting Details", 1, form_types=[SHIFTED]),
    field("oldOfficeShiftedPeriod", "Old Office Shifted Period", TEXT, "Shifting Details", 2, form_types=[SHIFTED]),
    field("currentCompanyPeriod", "Current Company Period", TEXT, "Shifting Details", 3, form_types=[SHIFTED]),
    field("shiftedPeriod", "Shifted Period", TEXT, "Shifting Details", 4, form_types=[SHIFTED]),
    field("premisesStatus", "Premises Status", SELECT, "Shifting Details", 5, form_types=[SHIFTED]),

    # --- NSP Details ---
    field("officeExistence", "Office Existence", SELECT, "NSP Details", 1, form_types=[NSP]),

    # --- Entry Restriction / Contact ---
    *met_person_entry_fields(),
    field("applicantStayingStatus", "Applicant Staying Status", SELECT, "Entry Restriction Details", 5, form_types=[ENTRY_RESTRICTED]),
    *untraceable_fields(),

    # --- Area Assessment ---
    *area_assessment_fields(),
]


MAPPING = FieldMappingTable(
    {
        **UI_STATE_IGNORED,
        **DERIVED_IGNORED,
        **BASE_MAPPING,
        **EXTRA_LANDMARK_MAPPING,
        **TPC_MAPPING,
        **UNTRACEABLE_MAPPING,
        **AREA_MAPPING,
        "resiCumOfficeStatus": IGNORED,

        # Name plates
        "companyNamePlateStatus": Mapped("company_nameplate_status"),
        "nameOnBoard": Mapped("name_on_company_board"),
        "nameOnCompanyBoard": Mapped("name_on_company_board"),
        "doorNamePlateStatus": Mapped("door_nameplate_status"),
        "nameOnDoorPlate": Mapped("name_on_door_plate"),
        "societyNamePlateStatus": Mapped("society_nameplate_status"),
        "nameOnSocietyBoard": Mapped("name_on_society_board"),

        # Residence side
        "houseStatus": Mapped("house_status"),
        "metPersonName": Mapped("met_person_name"),
        "metPersonRelation": Mapped("met_person_relation"),
        "totalFamilyMembers": Mapped("total_family_members", INTEGER),
        "totalEarning": Mapped("total_earning", DECIMAL),
        "applicantDob": Mapped("applicant_dob", DATE_KIND),
        "applicantAge": Mapped("applicant_age", INTEGER),
        "stayingPeriod": Mapped("staying_period"),
        "stayingStatus": Mapped("staying_status"),
        "approxArea": Mapped("approx_area", DECIMAL),
        "documentShownStatus": Mapped("document_shown_status"),
        "documentType": Mapped("document_type"),

        # Office side
        "officeStatus": Mapped("office_status"),
        "officeExistence": Mapped("office_existence"),
        "officeType": Mapped("office_type"),
        "designation": Mapped("designation"),
        "applicantDesignation": Mapped("applicant_designation"),
        "workingPeriod": Mapped("working_period"),
        "workingStatus": Mapped("working_status"),
        "applicantWorkingPremises": Mapped("applicant_working_premises"),
        "sittingLocation": Mapped("sitting_location"),
        "currentCompanyName": Mapped("current_company_name"),
        "companyNatureOfBusiness": Mapped("company_nature_of_business"),
        "businessPeriod": Mapped("business_period"),
        "establishmentPeriod": Mapped("establishment_period"),
        "staffStrength": Mapped("staff_strength", INTEGER),
        "staffSeen": Mapped("staff_seen", INTEGER),

        # TPC names as sent by the residence half of the form
        "tpcName1": Mapped("tpc_name1"),
        "tpcName2": Mapped("tpc_name2"),

        # Shifted / entry restricted
        "shiftedPeriod": Mapped("shifted_period"),
        "oldOfficeShiftedPeriod": Mapped("old_office_shifted_period"),
        "currentCompanyPeriod": Mapped("current_company_period"),
        "premisesStatus": Mapped("premises_status"),
        "nameOfMetPerson": Mapped("name_of_met_person"),
        "metPersonType": Mapped("met_person_type"),
        "metPersonConfirmation": Mapped("met_person_confirmation"),
        "applicantWorkingStatus": Mapped("applicant_working_status"),
        "applicantStayingStatus": Mapped("applicant_staying_status"),
        "otherExtraRemark": Mapped("other_extra_remark"),

        # Legacy names
        "metPerson": Mapped("met_person_name"),
        "companyName": Mapped("company_nature_of_business"),
        "totalEmployees": Mapped("staff_strength", INTEGER),
        "residenceSetup": IGNORED,
        "businessSetup": IGNORED,
        "relation": Mapped("met_person_relation"),
        "businessStatus": Mapped("office_status"),
        "businessLocation": Mapped("sitting_location"),
        "businessOperatingAddress": IGNORED,
        "applicantStayingFloor": Mapped("address_floor"),
        "businessNature": Mapped("company_nature_of_business"),
        "metPersonStatus": Mapped("met_person_type"),
        "addressTraceable": Mapped("address_locatable"),
        "fullAddress": Mapped("full_address"),
        "customerName": Mapped("customer_name"),
        "customerPhone": Mapped("customer_phone"),
        "customerEmail": Mapped("customer_email"),
        "businessOperatingHours": IGNORED,
        "workingHours": Mapped("working_period"),
        "businessType": Mapped("office_type"),
        "establishmentYear": Mapped("establishment_period"),
        "totalStaff": Mapped("staff_strength", INTEGER),
        "staffPresent": Mapped("staff_seen", INTEGER),
        "familyMembers": Mapped("total_family_members", INTEGER),
        "monthlyIncome": Mapped("total_earning", DECIMAL),
        "dateOfBirth": Mapped("applicant_dob", DATE_KIND),
        "age": Mapped("applicant_age", INTEGER),
        "residenceType": Mapped("house_status"),
        "ownershipStatus": Mapped("staying_status"),
        "documentShown": Mapped("document_shown_status"),
        "documentTypes": Mapped("document_type"),
        "idProofShown": Mapped("document_shown_status"),
        "applicantName": Mapped("customer_name"),
        "residenceConfirmed": IGNORED,
        "officeConfirmed": IGNORED,
        "nameOnNamePlate": Mapped("name_on_door_plate"),
        "nameOnSocietyNamePlate": Mapped("name_on_society_board"),
        "nameOnCompanyNamePlate": Mapped("name_on_company_board"),
        "shiftedFrom": Mapped("shifted_period"),

        # Submission metadata stored elsewhere
        "oldOfficeAddress": IGNORED,
        "newOfficeAddress": IGNORED,
        "reasonForShift": IGNORED,
        "verificationOutcome": IGNORED,
        "submissionDate": IGNORED,
        "submissionTime": IGNORED,
        "geoLocation": IGNORED,
        "photoCount": IGNORED,
        "formType": IGNORED,
        "caseNumber": IGNORED,
        "assignedAgent": IGNORED,
    },
    strict=True,
)


REQUIRED_FIELDS = {
    POSITIVE: [
        "addressLocatable", "addressRating", "houseStatus", "officeStatus",
        "metPersonName", "metPersonRelation", "designation", "applicantDesignation",
        "totalFamilyMembers", "workingPeriod", "workingStatus", "officeType",
        "companyNatureOfBusiness", "businessPeriod", "staffStrength", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    SHIFTED: [
        "addressLocatable", "addressRating", "houseStatus", "officeStatus",
        "metPersonName", "designation", "currentCompanyName", "oldOfficeShiftedPeriod",
        "locality", "addressStructure", *AREA_REQUIRED,
    ],
    NSP: [
        "addressLocatable", "addressRating", "houseStatus", "officeStatus",
        "officeExistence", "metPersonName", "designation", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    ENTRY_RESTRICTED: [
        "addressLocatable", "addressRating", "nameOfMetPerson", "metPersonType",
        "metPersonConfirmation", "applicantWorkingStatus", "applicantStayingStatus",
        "locality", "addressStructure", *AREA_REQUIRED,
    ],
    UNTRACEABLE: UNTRACEABLE_REQUIRED,
}


CONDITIONAL_RULES = [
    ConditionalRule(
        when="houseStatus", equals="Opened", then="totalFamilyMembers",
        message="totalFamilyMembers should be specified when house is opened",
    ),
    ConditionalRule(
        when="officeStatus", equals="Opened", then="staffSeen",
        message="staffSeen should be specified when office is opened",
    ),
    TPC_RULE,
]


SCHEMA = VerificationSchema(
    verification_type=VerificationType.RESIDENCE_CUM_OFFICE,
    table_name="residenceCumOfficeVerificationReports",
    fields=FIELDS,
    mapping=MAPPING,
    required_fields=REQUIRED_FIELDS,
    conditional_rules=CONDITIONAL_RULES,
    aliases=("RESIDENCE-CUM-OFFICE", "Residence cum Office"),
    detection_indicators=indicators(
        positive=["applicantName", "businessName", "dualUsage", "businessHours", "familyMembers"],
        shifted=["shiftedPeriod", "currentLocation", "premisesStatus", "businessShifted"],
        nsp=["temporaryUsage", "businessStatus", "residenceStatus"],
        entry_restricted=["entryRestrictionReason", "securityPersonName", "accessRestricted"],
        untraceable=["callRemark", "contactPerson", "premisesClosed", "noActivity"],
    ),
)
