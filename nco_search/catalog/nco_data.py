"""
nco_search/catalog/nco_data.py

Bundled sample of the National Classification of Occupations (NCO).

Each record carries the four-level hierarchy (division → group → sub-group →
occupation), a sector label, search keywords, a skill level (1–4) and the
main tasks.  ``load_catalog(NCO_DATA)`` turns the list into immutable
``Occupation`` models.
"""

# ---------------------------------------------------------------------------
# Division titles (level 1)
# ---------------------------------------------------------------------------

DIVISIONS: dict[str, str] = {
    "1": "Managers",
    "2": "Professionals",
    "3": "Technicians and Associate Professionals",
    "4": "Clerical Support Workers",
    "5": "Service and Sales Workers",
    "7": "Craft and Related Trades Workers",
    "8": "Plant and Machine Operators and Assemblers",
    "9": "Elementary Occupations",
}


# ---------------------------------------------------------------------------
# Occupations
# ---------------------------------------------------------------------------

NCO_DATA: list[dict] = [

    # ── Craft and Related Trades Workers ────────────────────────────────────
    {"code": "75320101",
     "title": "Sewing Machine Operator",
     "description": "Operates sewing machines to join, reinforce, or decorate materials such as "
                    "garments, shoes, parachutes, sails, and similar products.",
     "division": "7", "division_title": "Craft and Related Trades Workers",
     "group": "75",
     "group_title": "Food Processing, Wood Working, Garment and Other Craft and Related Trades Workers",
     "sub_group": "753", "sub_group_title": "Garment and Related Trades Workers",
     "sector": "Manufacturing",
     "keywords": ["sewing", "machine operator", "garment", "textile", "fabric",
                  "clothing", "stitching", "tailoring"],
     "skill_level": 2,
     "tasks": ["Set up and operate industrial sewing machines",
               "Select appropriate thread, needles, and machine settings",
               "Guide fabric through machine to create seams",
               "Monitor stitch quality and make adjustments",
               "Perform routine machine maintenance"]},

    # ── Professionals ───────────────────────────────────────────────────────
    {"code": "25210201",
     "title": "Software Developer",
     "description": "Designs, develops, tests, and maintains software applications and systems "
                    "using various programming languages and development tools.",
     "division": "2", "division_title": "Professionals",
     "group": "25", "group_title": "Information and Communications Technology Professionals",
     "sub_group": "252", "sub_group_title": "Software and Applications Developers and Analysts",
     "sector": "Information Technology",
     "keywords": ["software", "developer", "programming", "coding", "application",
                  "system", "technology", "computer"],
     "skill_level": 4,
     "tasks": ["Analyze user requirements and design software solutions",
               "Write, test, and debug computer programs",
               "Maintain and update existing software systems",
               "Collaborate with teams to develop applications",
               "Document software specifications and user guides"]},
    {"code": "22110101",
     "title": "General Medical Practitioner",
     "description": "Diagnoses, treats, and prevents human illness, disease, injury, and other "
                    "physical and mental impairments through application of medical knowledge "
                    "and skills.",
     "division": "2", "division_title": "Professionals",
     "group": "22", "group_title": "Health Professionals",
     "sub_group": "221", "sub_group_title": "Medical Doctors",
     "sector": "Healthcare",
     "keywords": ["doctor", "physician", "medical", "healthcare", "diagnosis",
                  "treatment", "patient", "medicine"],
     "skill_level": 4,
     "tasks": ["Examine patients to assess their health condition",
               "Diagnose illnesses and medical conditions",
               "Prescribe treatments and medications",
               "Maintain patient medical records",
               "Provide preventive healthcare advice"]},
    {"code": "23210101",
     "title": "School Teacher (Primary)",
     "description": "Plans, organizes, and conducts educational programs for primary school "
                    "students to facilitate their academic, social, and emotional development.",
     "division": "2", "division_title": "Professionals",
     "group": "23", "group_title": "Teaching Professionals",
     "sub_group": "232", "sub_group_title": "Primary School and Early Childhood Teachers",
     "sector": "Education",
     "keywords": ["teacher", "education", "primary", "school", "children",
                  "instruction", "curriculum", "learning"],
     "skill_level": 4,
     "tasks": ["Plan and prepare lesson plans and teaching materials",
               "Instruct students in basic academic subjects",
               "Assess student progress and provide feedback",
               "Maintain classroom discipline and order",
               "Communicate with parents about student progress"]},

    # ── Service and Sales Workers ───────────────────────────────────────────
    {"code": "51210101",
     "title": "Cook",
     "description": "Prepares and cooks food in restaurants, hotels, hospitals, and other "
                    "establishments by combining and cooking ingredients according to recipes.",
     "division": "5", "division_title": "Service and Sales Workers",
     "group": "51", "group_title": "Personal Service Workers",
     "sub_group": "512", "sub_group_title": "Cooks",
     "sector": "Hospitality",
     "keywords": ["cook", "chef", "food", "cooking", "kitchen", "restaurant",
                  "culinary", "meal preparation"],
     "skill_level": 2,
     "tasks": ["Plan menus and prepare ingredients",
               "Cook food according to recipes and standards",
               "Season and garnish dishes appropriately",
               "Maintain kitchen cleanliness and hygiene",
               "Monitor food inventory and supplies"]},

    # ── Elementary Occupations ──────────────────────────────────────────────
    {"code": "93210101",
     "title": "Farm Worker",
     "description": "Performs basic agricultural tasks such as planting, cultivating, and "
                    "harvesting crops, and caring for farm animals.",
     "division": "9", "division_title": "Elementary Occupations",
     "group": "92", "group_title": "Agricultural, Forestry and Fishery Labourers",
     "sub_group": "921", "sub_group_title": "Agricultural, Forestry and Fishery Labourers",
     "sector": "Agriculture",
     "keywords": ["farm", "agriculture", "crops", "farming", "harvest", "planting",
                  "rural", "agricultural worker"],
     "skill_level": 1,
     "tasks": ["Plant and tend to crops",
               "Operate basic farm equipment",
               "Harvest crops when ready",
               "Care for farm animals",
               "Maintain farm facilities and equipment"]},

    # ── Clerical Support Workers ────────────────────────────────────────────
    {"code": "41210101",
     "title": "Bank Clerk",
     "description": "Performs clerical and customer service duties in banks and financial "
                    "institutions, processing transactions and maintaining records.",
     "division": "4", "division_title": "Clerical Support Workers",
     "group": "41", "group_title": "General and Keyboard Clerks",
     "sub_group": "412", "sub_group_title": "Numerical and Material Recording Clerks",
     "sector": "Banking and Finance",
     "keywords": ["bank", "clerk", "banking", "finance", "transactions",
                  "customer service", "records", "clerical"],
     "skill_level": 2,
     "tasks": ["Process customer banking transactions",
               "Maintain accurate financial records",
               "Assist customers with account inquiries",
               "Handle cash and check deposits",
               "Prepare financial reports and documents"]},

    # ── Plant and Machine Operators ─────────────────────────────────────────
    {"code": "81210101",
     "title": "Machine Operator",
     "description": "Operates and monitors industrial machines and equipment to produce goods "
                    "according to specifications and quality standards.",
     "division": "8", "division_title": "Plant and Machine Operators and Assemblers",
     "group": "81", "group_title": "Stationary Plant and Machine Operators",
     "sub_group": "812", "sub_group_title": "Metal Processing and Finishing Plant Operators",
     "sector": "Manufacturing",
     "keywords": ["machine", "operator", "manufacturing", "production", "industrial",
                  "equipment", "factory", "assembly"],
     "skill_level": 2,
     "tasks": ["Set up and operate industrial machinery",
               "Monitor production processes and quality",
               "Perform routine machine maintenance",
               "Record production data and metrics",
               "Follow safety procedures and protocols"]},

    # ── Service and Sales Workers ───────────────────────────────────────────
    {"code": "52210101",
     "title": "Shop Salesperson",
     "description": "Sells merchandise in retail stores, assists customers in making purchase "
                    "decisions, and provides information about products.",
     "division": "5", "division_title": "Service and Sales Workers",
     "group": "52", "group_title": "Sales Workers",
     "sub_group": "522", "sub_group_title": "Shop Salespersons",
     "sector": "Retail",
     "keywords": ["sales", "retail", "shop", "customer service", "merchandise",
                  "selling", "store", "salesperson"],
     "skill_level": 2,
     "tasks": ["Assist customers in selecting products",
               "Process sales transactions at point of sale",
               "Maintain product displays and inventory",
               "Provide product information and recommendations",
               "Handle customer complaints and returns"]},

    # ── Craft and Related Trades Workers ────────────────────────────────────
    {"code": "72110101",
     "title": "Building Construction Worker",
     "description": "Performs various construction tasks in the building and maintenance of "
                    "structures such as houses, office buildings, and other constructions.",
     "division": "7", "division_title": "Craft and Related Trades Workers",
     "group": "71", "group_title": "Building and Related Trades Workers, Excluding Electricians",
     "sub_group": "711", "sub_group_title": "Building Frame and Related Trades Workers",
     "sector": "Construction",
     "keywords": ["construction", "building", "worker", "cement", "concrete",
                  "structure", "laborer", "site"],
     "skill_level": 2,
     "tasks": ["Mix and pour concrete for foundations",
               "Assist in building framework structures",
               "Carry and position construction materials",
               "Use basic construction tools and equipment",
               "Follow safety protocols on construction sites"]},
]
