from ups_xml.models import Location, Package, Reference, UnitSystem


def make_us_origin(**overrides) -> Location:
    values = {
        "name": "Test Shipper",
        "company_name": "Acme Widgets",
        "phone": "(410) 555-1234",
        "address1": "123 Main St",
        "city": "Timonium",
        "province": "MD",
        "postal_code": "21093",
        "country": "US",
        "address_type": "commercial",
    }
    values.update(overrides)
    return Location(**values)


def make_destination(**overrides) -> Location:
    values = {
        "name": "Test Recipient",
        "address1": "456 Oak Ave",
        "address2": "Apt 4B",
        "city": "New York",
        "province": "NY",
        "postal_code": "10001",
        "country": "US",
    }
    values.update(overrides)
    return Location(**values)


def make_package(**overrides) -> Package:
    values = {
        "length": 12,
        "width": 10,
        "height": 4,
        "weight": 5,
        "units": UnitSystem.IMPERIAL,
        "package_type": "02",
    }
    values.update(overrides)
    return Package(**values)


def make_reference_package() -> Package:
    return make_package(
        description="Books",
        delivery_confirmation_type="2",
        references=(Reference("PO", "12345", barcode=True), Reference("IK", "INV-9")),
    )


def failure_response(root: str = "RatingServiceSelectionResponse") -> str:
    return (
        f"<{root}>"
        "<Response>"
        "<ResponseStatusCode>0</ResponseStatusCode>"
        "<ResponseStatusDescription>Failure</ResponseStatusDescription>"
        "<Error>"
        "<ErrorSeverity>Hard</ErrorSeverity>"
        "<ErrorCode>111285</ErrorCode>"
        "<ErrorDescription>The postal code 99999 is invalid for NY United States.</ErrorDescription>"
        "<MinimumRetrySeconds>30</MinimumRetrySeconds>"
        "<ErrorLocation>"
        "<ErrorLocationElementName>ShipTo</ErrorLocationElementName>"
        "<ErrorLocationAttributeName>PostalCode</ErrorLocationAttributeName>"
        "</ErrorLocation>"
        "</Error>"
        "</Response>"
        f"</{root}>"
    )


SUCCESS_RESPONSE_BLOCK = (
    "<Response>"
    "<ResponseStatusCode>1</ResponseStatusCode>"
    "<ResponseStatusDescription>Success</ResponseStatusDescription>"
    "</Response>"
)

RATE_RESPONSE = (
    '<?xml version="1.0"?>'
    "<RatingServiceSelectionResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<RatedShipment>"
    "<Service><Code>03</Code></Service>"
    "<GuaranteedDaysToDelivery>2</GuaranteedDaysToDelivery>"
    "<TotalCharges><CurrencyCode>USD</CurrencyCode><MonetaryValue>12.50</MonetaryValue></TotalCharges>"
    "</RatedShipment>"
    "</RatingServiceSelectionResponse>"
)

MULTI_RATE_RESPONSE = (
    "<RatingServiceSelectionResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<RatedShipment>"
    "<Service><Code>01</Code></Service>"
    "<GuaranteedDaysToDelivery>1</GuaranteedDaysToDelivery>"
    "<TotalCharges><CurrencyCode>USD</CurrencyCode><MonetaryValue>45.10</MonetaryValue></TotalCharges>"
    "</RatedShipment>"
    "<RatedShipment>"
    "<Service><Code>03</Code></Service>"
    "<GuaranteedDaysToDelivery></GuaranteedDaysToDelivery>"
    "<TotalCharges><CurrencyCode>USD</CurrencyCode><MonetaryValue>9.99</MonetaryValue></TotalCharges>"
    "</RatedShipment>"
    "</RatingServiceSelectionResponse>"
)

TRANSIT_TIME_RESPONSE = (
    "<TimeInTransitResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<TransitResponse>"
    "<ServiceSummary><Service><Code>GND</Code></Service>"
    "<EstimatedArrival><BusinessTransitDays>3</BusinessTransitDays></EstimatedArrival></ServiceSummary>"
    "<ServiceSummary><Service><Code>1DA</Code></Service>"
    "<EstimatedArrival><BusinessTransitDays>1</BusinessTransitDays></EstimatedArrival></ServiceSummary>"
    "</TransitResponse>"
    "</TimeInTransitResponse>"
)

TRACKING_RESPONSE = (
    "<TrackResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<Shipment>"
    "<ScheduledDeliveryDate>20230117</ScheduledDeliveryDate>"
    "<Package>"
    "<TrackingNumber>1Z12345E0205271688</TrackingNumber>"
    "<Activity>"
    "<ActivityLocation><Address><City>ATLANTA</City><StateProvinceCode>GA</StateProvinceCode>"
    "<CountryCode>US</CountryCode></Address></ActivityLocation>"
    "<Status><StatusType><Code>I</Code><Description>ARRIVAL SCAN</Description></StatusType>"
    "<StatusCode><Code>AR</Code></StatusCode></Status>"
    "<Date>20230115</Date><Time>093045</Time>"
    "</Activity>"
    "<Activity>"
    "<ActivityLocation><Address><City>TIMONIUM</City><StateProvinceCode>MD</StateProvinceCode>"
    "<CountryCode>US</CountryCode></Address></ActivityLocation>"
    "<Status><StatusType><Code>P</Code><Description>PICKUP SCAN</Description></StatusType>"
    "<StatusCode><Code>PU</Code></StatusCode></Status>"
    "<Date>20230114</Date><Time>171500</Time>"
    "</Activity>"
    "</Package>"
    "</Shipment>"
    "</TrackResponse>"
)

RESCHEDULED_TRACKING_RESPONSE = (
    "<TrackResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<Shipment><Package>"
    "<TrackingNumber>1Z999</TrackingNumber>"
    "<RescheduledDeliveryDate>20230120</RescheduledDeliveryDate>"
    "</Package></Shipment>"
    "</TrackResponse>"
)

SHIP_CONFIRM_RESPONSE = (
    "<ShipmentConfirmResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<ShipmentCharges><TotalCharges><MonetaryValue>15.20</MonetaryValue></TotalCharges></ShipmentCharges>"
    "<ShipmentIdentificationNumber>1Z2220060290602143</ShipmentIdentificationNumber>"
    "<ShipmentDigest>rO0ABXNyACpjb20udXBzLmVjaXMuY29yZS5zaGlwbWVudHM</ShipmentDigest>"
    "</ShipmentConfirmResponse>"
)

SHIP_ACCEPT_RESPONSE = (
    "<ShipmentAcceptResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<ShipmentResults>"
    "<ShipmentCharges><TotalCharges><CurrencyCode>USD</CurrencyCode>"
    "<MonetaryValue>15.20</MonetaryValue></TotalCharges></ShipmentCharges>"
    "<ShipmentIdentificationNumber>1Z2220060290602143</ShipmentIdentificationNumber>"
    "<PackageResults><TrackingNumber>1Z2220060290602143</TrackingNumber>"
    "<LabelImage><LabelImageFormat><Code>GIF</Code></LabelImageFormat>"
    "<GraphicImage>R0lGODdhAQABAIAAAP</GraphicImage></LabelImage></PackageResults>"
    "<PackageResults><TrackingNumber>1Z2220060291994175</TrackingNumber>"
    "<LabelImage><LabelImageFormat><Code>GIF</Code></LabelImageFormat>"
    "<GraphicImage>R0lGODdhAgACAIAAAP</GraphicImage></LabelImage></PackageResults>"
    "</ShipmentResults>"
    "</ShipmentAcceptResponse>"
)

VOID_RESPONSE = (
    "<VoidShipmentResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<Status>"
    "<StatusType><Code>1</Code><Description>Success</Description></StatusType>"
    "<StatusCode><Code>1</Code><Description>Success</Description></StatusCode>"
    "</Status>"
    "<PackageLevelResults><TrackingNumber>1Z2220060290602143</TrackingNumber>"
    "<StatusCode><Code>1</Code><Description>Voided</Description></StatusCode></PackageLevelResults>"
    "<PackageLevelResults><TrackingNumber>1Z2220060291994175</TrackingNumber>"
    "<StatusCode><Code>2</Code><Description>Already voided</Description></StatusCode></PackageLevelResults>"
    "</VoidShipmentResponse>"
)

ADDRESS_VALIDATION_RESPONSE = (
    "<AddressValidationResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<AddressValidationResult><Rank>1</Rank><Quality>0.9875</Quality>"
    "<Address><City>TIMONIUM</City><StateProvinceCode>MD</StateProvinceCode></Address>"
    "<PostalCodeLowEnd>21093</PostalCodeLowEnd><PostalCodeHighEnd>21094</PostalCodeHighEnd>"
    "</AddressValidationResult>"
    "<AddressValidationResult><Rank>2</Rank><Quality>0.8</Quality>"
    "<Address><City>LUTHERVILLE TIMONIUM</City><StateProvinceCode>MD</StateProvinceCode></Address>"
    "<PostalCodeLowEnd>21093</PostalCodeLowEnd><PostalCodeHighEnd>21093</PostalCodeHighEnd>"
    "</AddressValidationResult>"
    "</AddressValidationResponse>"
)

ADDRESS_VALIDATION_STREET_RESPONSE = (
    "<AddressValidationResponse>"
    + SUCCESS_RESPONSE_BLOCK
    + "<ValidAddressIndicator/>"
    "<AddressKeyFormat>"
    "<AddressLine>1 WALL ST</AddressLine><AddressLine>FL 2</AddressLine>"
    "<Region>NEW YORK NY 10005-2501</Region>"
    "<PoliticalDivision2>NEW YORK</PoliticalDivision2><PoliticalDivision1>NY</PoliticalDivision1>"
    "<PostcodePrimaryLow>10005</PostcodePrimaryLow><PostcodeExtendedLow>2501</PostcodeExtendedLow>"
    "<CountryCode>US</CountryCode>"
    "</AddressKeyFormat>"
    "<AddressKeyFormat>"
    "<AddressLine>1 WALL STREET CT</AddressLine>"
    "<Region>NEW YORK NY 10005-3301</Region>"
    "<PoliticalDivision2>NEW YORK</PoliticalDivision2><PoliticalDivision1>NY</PoliticalDivision1>"
    "<PostcodePrimaryLow>10005</PostcodePrimaryLow><PostcodeExtendedLow>3301</PostcodeExtendedLow>"
    "<CountryCode>US</CountryCode>"
    "</AddressKeyFormat>"
    "</AddressValidationResponse>"
)
