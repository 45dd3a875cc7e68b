"""
Reference data shared by the RFQ and supplier generators.

Indian business geography, buyer archetypes and company-name fragments.
"""

# Buyer locations, "City, State" (Delhi NCR has no state part)
LOCATIONS = [
    "Mumbai, Maharashtra",
    "Delhi NCR",
    "Bangalore, Karnataka",
    "Chennai, Tamil Nadu",
    "Hyderabad, Telangana",
    "Pune, Maharashtra",
    "Ahmedabad, Gujarat",
    "Kolkata, West Bengal",
    "Surat, Gujarat",
    "Kanpur, Uttar Pradesh",
    "Lucknow, Uttar Pradesh",
    "Nagpur, Maharashtra",
    "Indore, Madhya Pradesh",
    "Bhopal, Madhya Pradesh",
    "Ludhiana, Punjab",
    "Agra, Uttar Pradesh",
    "Nashik, Maharashtra",
    "Faridabad, Haryana",
    "Meerut, Uttar Pradesh",
    "Rajkot, Gujarat",
    "Vadodara, Gujarat",
    "Ghaziabad, Uttar Pradesh",
    "Visakhapatnam, Andhra Pradesh",
    "Kochi, Kerala",
    "Coimbatore, Tamil Nadu",
    "Madurai, Tamil Nadu",
    "Jaipur, Rajasthan",
]

BUSINESS_TYPES = [
    "Large Enterprise",
    "Manufacturing Company",
    "Retail Chain",
    "Export House",
    "Government Department",
    "Public Sector",
    "Private Limited Company",
    "Partnership Firm",
    "Startup",
    "SME",
    "Industrial Group",
    "Trading Company",
    "Distribution Network",
]

BUYER_DESIGNATIONS = [
    "Procurement Manager",
    "Purchase Head",
    "Supply Chain Manager",
    "Operations Director",
    "General Manager",
    "Senior Manager",
    "Assistant General Manager",
    "Vice President",
    "Head of Operations",
    "Chief Procurement Officer",
    "Materials Manager",
    "Sourcing Manager",
    "Business Development Manager",
    "Project Manager",
    "Technical Manager",
]

SUPPLIER_DESIGNATIONS = [
    "Managing Director",
    "General Manager",
    "Sales Manager",
    "Purchase Manager",
    "Business Development Manager",
    "Export Manager",
    "Operations Manager",
    "Production Manager",
    "Quality Manager",
    "Technical Manager",
    "Owner",
    "Partner",
    "Director",
    "Vice President",
    "Assistant Manager",
]

# Buyer company names: "{prefix} {suffix}"
BUYER_COMPANY_PREFIXES = [
    "Bharat", "Indian", "National", "Supreme", "Premier", "Elite",
    "Advanced", "Modern", "Global", "Universal", "Excel", "Perfect",
    "Prime", "Royal", "Crown", "Golden", "Silver", "Diamond",
    "Platinum", "Crystal", "Stellar", "Apex", "Pinnacle", "Summit",
]

BUYER_COMPANY_SUFFIXES = [
    "Industries", "Enterprises", "Corporation", "Limited", "Pvt Ltd",
    "Group", "Systems", "Solutions", "Technologies", "Manufacturing",
    "Trading", "Exports", "Imports", "Services", "Products",
    "Equipment", "Machinery", "Materials", "Supplies", "Resources",
]

# Supplier company names: "{prefix} {category word} {suffix}"
SUPPLIER_COMPANY_PREFIXES = [
    "Supreme", "Royal", "Elite", "Premium", "Advanced", "Modern",
    "Global", "Universal", "National", "International", "United",
    "Associated", "Integrated", "Comprehensive", "Strategic", "Dynamic",
    "Innovative",
]

SUPPLIER_COMPANY_SUFFIXES = [
    "Pvt Ltd", "Ltd", "LLP", "Industries", "Enterprises", "Corporation",
    "Manufacturing Co", "Trading Co", "Exports", "International", "Group",
]

# Supplier sites with head-post-office pincodes
SUPPLIER_CITIES = [
    {"city": "Mumbai", "state": "Maharashtra", "pincode": "400001"},
    {"city": "Delhi", "state": "Delhi", "pincode": "110001"},
    {"city": "Bangalore", "state": "Karnataka", "pincode": "560001"},
    {"city": "Chennai", "state": "Tamil Nadu", "pincode": "600001"},
    {"city": "Hyderabad", "state": "Telangana", "pincode": "500001"},
    {"city": "Pune", "state": "Maharashtra", "pincode": "411001"},
    {"city": "Ahmedabad", "state": "Gujarat", "pincode": "380001"},
    {"city": "Kolkata", "state": "West Bengal", "pincode": "700001"},
    {"city": "Surat", "state": "Gujarat", "pincode": "395001"},
    {"city": "Jaipur", "state": "Rajasthan", "pincode": "302001"},
    {"city": "Lucknow", "state": "Uttar Pradesh", "pincode": "226001"},
    {"city": "Kanpur", "state": "Uttar Pradesh", "pincode": "208001"},
    {"city": "Nagpur", "state": "Maharashtra", "pincode": "440001"},
    {"city": "Indore", "state": "Madhya Pradesh", "pincode": "452001"},
    {"city": "Thane", "state": "Maharashtra", "pincode": "400601"},
    {"city": "Bhopal", "state": "Madhya Pradesh", "pincode": "462001"},
    {"city": "Visakhapatnam", "state": "Andhra Pradesh", "pincode": "530001"},
    {"city": "Vadodara", "state": "Gujarat", "pincode": "390001"},
    {"city": "Firozabad", "state": "Uttar Pradesh", "pincode": "283203"},
    {"city": "Ludhiana", "state": "Punjab", "pincode": "141001"},
    {"city": "Rajkot", "state": "Gujarat", "pincode": "360001"},
    {"city": "Agra", "state": "Uttar Pradesh", "pincode": "282001"},
    {"city": "Siliguri", "state": "West Bengal", "pincode": "734001"},
    {"city": "Nashik", "state": "Maharashtra", "pincode": "422001"},
    {"city": "Faridabad", "state": "Haryana", "pincode": "121001"},
    {"city": "Patiala", "state": "Punjab", "pincode": "147001"},
    {"city": "Ghaziabad", "state": "Uttar Pradesh", "pincode": "201001"},
    {"city": "Coimbatore", "state": "Tamil Nadu", "pincode": "641001"},
    {"city": "Madurai", "state": "Tamil Nadu", "pincode": "625001"},
]

# state -> (GST state code, two-letter registration code)
STATE_CODES = {
    "Punjab": ("03", "PB"),
    "Haryana": ("06", "HR"),
    "Delhi": ("07", "DL"),
    "Rajasthan": ("08", "RJ"),
    "Uttar Pradesh": ("09", "UP"),
    "West Bengal": ("19", "WB"),
    "Madhya Pradesh": ("23", "MP"),
    "Gujarat": ("24", "GJ"),
    "Maharashtra": ("27", "MH"),
    "Karnataka": ("29", "KA"),
    "Kerala": ("32", "KL"),
    "Tamil Nadu": ("33", "TN"),
    "Telangana": ("36", "TS"),
    "Andhra Pradesh": ("37", "AP"),
}

REGIONAL_LANGUAGES = {
    "Maharashtra": "Marathi",
    "Karnataka": "Kannada",
    "Tamil Nadu": "Tamil",
    "Gujarat": "Gujarati",
    "Punjab": "Punjabi",
    "West Bengal": "Bengali",
    "Andhra Pradesh": "Telugu",
    "Telangana": "Telugu",
    "Rajasthan": "Rajasthani",
    "Uttar Pradesh": "Urdu",
    "Haryana": "Haryanvi",
    "Kerala": "Malayalam",
}
DEFAULT_REGIONAL_LANGUAGE = "Hindi"

PHONE_PREFIXES = ["+91 98", "+91 99", "+91 97", "+91 96", "+91 95"]
