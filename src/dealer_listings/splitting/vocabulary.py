"""Static vocabularies used by the free-text splitting heuristics."""

# Known car makes. Order matters only for combined-column detection, which
# records the first make found in each sample; splitting sorts by length.
KNOWN_MAKES = [
    # German
    "Volkswagen", "VW", "Audi", "BMW", "Mercedes", "Mercedes-Benz", "Porsche", "Opel",
    # Japanese
    "Toyota", "Honda", "Nissan", "Mazda", "Subaru", "Mitsubishi", "Suzuki", "Lexus",
    "Infiniti", "Acura",
    # Korean
    "Hyundai", "Kia", "Genesis",
    # American
    "Ford", "Chevrolet", "Chevy", "GMC", "Dodge", "Jeep", "Chrysler", "Cadillac", "Lincoln",
    "Buick", "Tesla",
    # European
    "Volvo", "Peugeot", "Renault", "Citroen", "Fiat", "Alfa Romeo", "Seat", "Skoda", "Saab",
    # British
    "Land Rover", "Range Rover", "Jaguar", "Mini", "Bentley", "Rolls-Royce", "Aston Martin",
    "McLaren",
    # Italian
    "Ferrari", "Lamborghini", "Maserati",
    # Chinese
    "BYD", "Geely", "Great Wall", "Haval", "Chery", "SAIC", "NIO", "XPeng", "Li Auto",
    "Dongfeng", "FAW", "Changan", "GAC", "BAIC", "JAC", "Zotye", "Foton", "Wuling", "Baojun",
    "Roewe", "MG", "Lynk & Co",
    # Other
    "Tata", "Mahindra", "Proton", "Perodua",
]

# Canonical names for matched make text. Keys are case-sensitive.
MAKE_ALIASES = {
    "VW": "Volkswagen",
    "Chevy": "Chevrolet",
    "Mercedes-Benz": "Mercedes",
    "Range Rover": "Land Rover",  # Range Rover is a Land Rover model
}

# Fixes applied after first-letter capitalization
MAKE_CASE_FIXES = {
    "Vw": "Volkswagen",
    "Bmw": "BMW",
}

# Chinese joint venture parent companies that prefix the actual make ("GAC Honda")
PARENT_COMPANIES = [
    "GAC", "SAIC", "FAW", "Dongfeng", "BAIC", "Changan", "Brilliance", "Beijing",
    "Guangzhou", "Shanghai", "Geely", "Great Wall", "Chery", "BYD",
]

# Colors searched in descriptions. The first entry found wins, so generic
# names listed early shadow compound names listed later ("Blue" before "Sky Blue").
DESCRIPTION_COLORS = [
    "Black", "White", "Silver", "Gray", "Grey", "Red", "Blue", "Green", "Yellow",
    "Orange", "Brown", "Beige", "Gold", "Pearl White", "Metallic", "Sky Blue",
    "Manganese Black", "Starry Gold", "Rose Gold", "Mountain Green", "Pearl",
]
