from __future__ import annotations

from geoarena.geo.types import Country

COUNTRIES: tuple[Country, ...] = (
    # Europe
    Country("AL", "Albania", "Tirana", "Europe", (41.15, 20.17)),
    Country("AD", "Andorra", "Andorra la Vella", "Europe", (42.55, 1.6)),
    Country("AT", "Austria", "Vienna", "Europe", (47.52, 14.55)),
    Country("BY", "Belarus", "Minsk", "Europe", (53.71, 27.97)),
    Country("BE", "Belgium", "Brussels", "Europe", (50.85, 4.35)),
    Country("BA", "Bosnia and Herzegovina", "Sarajevo", "Europe", (43.87, 17.68)),
    Country("BG", "Bulgaria", "Sofia", "Europe", (42.73, 25.49)),
    Country("HR", "Croatia", "Zagreb", "Europe", (45.1, 15.2)),
    Country("CZ", "Czech Republic", "Prague", "Europe", (49.82, 15.47)),
    Country("DK", "Denmark", "Copenhagen", "Europe", (56.26, 9.5)),
    Country("EE", "Estonia", "Tallinn", "Europe", (58.6, 25.01)),
    Country("FI", "Finland", "Helsinki", "Europe", (61.92, 25.75)),
    Country("FR", "France", "Paris", "Europe", (46.23, 2.21)),
    Country("DE", "Germany", "Berlin", "Europe", (51.17, 10.45)),
    Country("GR", "Greece", "Athens", "Europe", (39.07, 21.82)),
    Country("HU", "Hungary", "Budapest", "Europe", (47.16, 19.5)),
    Country("IS", "Iceland", "Reykjavik", "Europe", (64.96, -19.02)),
    Country("IE", "Ireland", "Dublin", "Europe", (53.41, -8.24)),
    Country("IT", "Italy", "Rome", "Europe", (41.87, 12.57)),
    Country("XK", "Kosovo", "Pristina", "Europe", (42.6, 20.9)),
    Country("LV", "Latvia", "Riga", "Europe", (56.88, 24.6)),
    Country("LI", "Liechtenstein", "Vaduz", "Europe", (47.17, 9.52)),
    Country("LT", "Lithuania", "Vilnius", "Europe", (55.17, 23.88)),
    Country("LU", "Luxembourg", "Luxembourg City", "Europe", (49.82, 6.13)),
    Country("MK", "North Macedonia", "Skopje", "Europe", (41.51, 21.75)),
    Country("MT", "Malta", "Valletta", "Europe", (35.94, 14.38)),
    Country("MD", "Moldova", "Chisinau", "Europe", (47.41, 28.37)),
    Country("MC", "Monaco", "Monaco", "Europe", (43.75, 7.42)),
    Country("ME", "Montenegro", "Podgorica", "Europe", (42.71, 19.37)),
    Country("NL", "Netherlands", "Amsterdam", "Europe", (52.13, 5.29)),
    Country("NO", "Norway", "Oslo", "Europe", (60.47, 8.47)),
    Country("PL", "Poland", "Warsaw", "Europe", (51.92, 19.15)),
    Country("PT", "Portugal", "Lisbon", "Europe", (39.4, -8.22)),
    Country("RO", "Romania", "Bucharest", "Europe", (45.94, 24.97)),
    Country("RU", "Russia", "Moscow", "Europe", (61.52, 105.32)),
    Country("SM", "San Marino", "San Marino", "Europe", (43.94, 12.46)),
    Country("RS", "Serbia", "Belgrade", "Europe", (44.02, 21.01)),
    Country("SK", "Slovakia", "Bratislava", "Europe", (48.67, 19.7)),
    Country("SI", "Slovenia", "Ljubljana", "Europe", (46.15, 15.0)),
    Country("ES", "Spain", "Madrid", "Europe", (40.46, -3.75)),
    Country("SE", "Sweden", "Stockholm", "Europe", (60.13, 18.64)),
    Country("CH", "Switzerland", "Bern", "Europe", (46.82, 8.23)),
    Country("UA", "Ukraine", "Kyiv", "Europe", (48.38, 31.17)),
    Country("GB", "United Kingdom", "London", "Europe", (55.38, -3.44)),
    Country("VA", "Vatican City", "Vatican City", "Europe", (41.9, 12.45)),
    # Asia
    Country("AF", "Afghanistan", "Kabul", "Asia", (33.94, 67.71)),
    Country("AM", "Armenia", "Yerevan", "Asia", (40.07, 45.04)),
    Country("AZ", "Azerbaijan", "Baku", "Asia", (40.14, 47.58)),
    Country("BH", "Bahrain", "Manama", "Asia", (26.07, 50.55)),
    Country("BD", "Bangladesh", "Dhaka", "Asia", (23.68, 90.36)),
    Country("BT", "Bhutan", "Thimphu", "Asia", (27.51, 90.43)),
    Country("BN", "Brunei", "Bandar Seri Begawan", "Asia", (4.54, 114.73)),
    Country("KH", "Cambodia", "Phnom Penh", "Asia", (12.57, 104.99)),
    Country("CN", "China", "Beijing", "Asia", (35.86, 104.2)),
    Country("CY", "Cyprus", "Nicosia", "Asia", (35.13, 33.43)),
    Country("GE", "Georgia", "Tbilisi", "Asia", (42.32, 43.36)),
    Country("IN", "India", "New Delhi", "Asia", (20.59, 78.96)),
    Country("ID", "Indonesia", "Jakarta", "Asia", (-0.79, 113.92)),
    Country("IR", "Iran", "Tehran", "Asia", (32.43, 53.69)),
    Country("IQ", "Iraq", "Baghdad", "Asia", (33.22, 43.68)),
    Country("IL", "Israel", "Jerusalem", "Asia", (31.05, 34.85)),
    Country("JP", "Japan", "Tokyo", "Asia", (36.2, 138.25)),
    Country("JO", "Jordan", "Amman", "Asia", (30.59, 36.24)),
    Country("KZ", "Kazakhstan", "Astana", "Asia", (48.02, 66.92)),
    Country("KW", "Kuwait", "Kuwait City", "Asia", (29.31, 47.48)),
    Country("KG", "Kyrgyzstan", "Bishkek", "Asia", (41.2, 74.77)),
    Country("LA", "Laos", "Vientiane", "Asia", (19.86, 102.5)),
    Country("LB", "Lebanon", "Beirut", "Asia", (33.85, 35.86)),
    Country("MY", "Malaysia", "Kuala Lumpur", "Asia", (4.21, 101.98)),
    Country("MV", "Maldives", "Male", "Asia", (3.2, 73.22)),
    Country("MN", "Mongolia", "Ulaanbaatar", "Asia", (46.86, 103.85)),
    Country("MM", "Myanmar", "Naypyidaw", "Asia", (21.91, 95.96)),
    Country("NP", "Nepal", "Kathmandu", "Asia", (28.39, 84.12)),
    Country("KP", "North Korea", "Pyongyang", "Asia", (40.34, 127.51)),
    Country("OM", "Oman", "Muscat", "Asia", (21.51, 55.92)),
    Country("PK", "Pakistan", "Islamabad", "Asia", (30.38, 69.35)),
    Country("PS", "Palestine", "Ramallah", "Asia", (31.95, 35.23)),
    Country("PH", "Philippines", "Manila", "Asia", (12.88, 121.77)),
    Country("QA", "Qatar", "Doha", "Asia", (25.35, 51.18)),
    Country("SA", "Saudi Arabia", "Riyadh", "Asia", (23.89, 45.08)),
    Country("SG", "Singapore", "Singapore", "Asia", (1.35, 103.82)),
    Country("KR", "South Korea", "Seoul", "Asia", (35.91, 127.77)),
    Country("LK", "Sri Lanka", "Colombo", "Asia", (7.87, 80.77)),
    Country("SY", "Syria", "Damascus", "Asia", (34.8, 39.0)),
    Country("TW", "Taiwan", "Taipei", "Asia", (23.7, 120.96)),
    Country("TJ", "Tajikistan", "Dushanbe", "Asia", (38.86, 71.28)),
    Country("TH", "Thailand", "Bangkok", "Asia", (15.87, 100.99)),
    Country("TL", "Timor-Leste", "Dili", "Asia", (-8.87, 125.73)),
    Country("TR", "Turkey", "Ankara", "Asia", (38.96, 35.24)),
    Country("TM", "Turkmenistan", "Ashgabat", "Asia", (38.97, 59.56)),
    Country("AE", "United Arab Emirates", "Abu Dhabi", "Asia", (23.42, 53.85)),
    Country("UZ", "Uzbekistan", "Tashkent", "Asia", (41.38, 64.59)),
    Country("VN", "Vietnam", "Hanoi", "Asia", (14.06, 108.28)),
    Country("YE", "Yemen", "Sanaa", "Asia", (15.55, 48.52)),
    # Africa
    Country("DZ", "Algeria", "Algiers", "Africa", (28.03, 1.66)),
    Country("AO", "Angola", "Luanda", "Africa", (-11.2, 17.87)),
    Country("BJ", "Benin", "Porto-Novo", "Africa", (9.31, 2.32)),
    Country("BW", "Botswana", "Gaborone", "Africa", (-22.33, 24.68)),
    Country("BF", "Burkina Faso", "Ouagadougou", "Africa", (12.24, -1.56)),
    Country("BI", "Burundi", "Gitega", "Africa", (-3.37, 29.92)),
    Country("CV", "Cape Verde", "Praia", "Africa", (16.0, -24.01)),
    Country("CM", "Cameroon", "Yaounde", "Africa", (7.37, 12.35)),
    Country("CF", "Central African Republic", "Bangui", "Africa", (6.61, 20.94)),
    Country("TD", "Chad", "N'Djamena", "Africa", (15.45, 18.73)),
    Country("KM", "Comoros", "Moroni", "Africa", (-11.88, 43.87)),
    Country("CG", "Republic of the Congo", "Brazzaville", "Africa", (-0.23, 15.83)),
    Country("CD", "Democratic Republic of the Congo", "Kinshasa", "Africa", (-4.04, 21.76)),
    Country("CI", "Ivory Coast", "Yamoussoukro", "Africa", (7.54, -5.55)),
    Country("DJ", "Djibouti", "Djibouti", "Africa", (11.83, 42.59)),
    Country("EG", "Egypt", "Cairo", "Africa", (26.82, 30.8)),
    Country("GQ", "Equatorial Guinea", "Malabo", "Africa", (1.65, 10.27)),
    Country("ER", "Eritrea", "Asmara", "Africa", (15.18, 39.78)),
    Country("SZ", "Eswatini", "Mbabane", "Africa", (-26.52, 31.47)),
    Country("ET", "Ethiopia", "Addis Ababa", "Africa", (9.15, 40.49)),
    Country("GA", "Gabon", "Libreville", "Africa", (-0.8, 11.61)),
    Country("GM", "Gambia", "Banjul", "Africa", (13.44, -15.31)),
    Country("GH", "Ghana", "Accra", "Africa", (7.95, -1.02)),
    Country("GN", "Guinea", "Conakry", "Africa", (9.95, -11.36)),
    Country("GW", "Guinea-Bissau", "Bissau", "Africa", (11.8, -15.18)),
    Country("KE", "Kenya", "Nairobi", "Africa", (-0.02, 37.91)),
    Country("LS", "Lesotho", "Maseru", "Africa", (-29.61, 28.23)),
    Country("LR", "Liberia", "Monrovia", "Africa", (6.43, -9.43)),
    Country("LY", "Libya", "Tripoli", "Africa", (26.34, 17.23)),
    Country("MG", "Madagascar", "Antananarivo", "Africa", (-18.77, 46.87)),
    Country("MW", "Malawi", "Lilongwe", "Africa", (-13.25, 34.3)),
    Country("ML", "Mali", "Bamako", "Africa", (17.57, -4.0)),
    Country("MR", "Mauritania", "Nouakchott", "Africa", (21.01, -10.94)),
    Country("MU", "Mauritius", "Port Louis", "Africa", (-20.35, 57.55)),
    Country("MA", "Morocco", "Rabat", "Africa", (31.79, -7.09)),
    Country("MZ", "Mozambique", "Maputo", "Africa", (-18.67, 35.53)),
    Country("NA", "Namibia", "Windhoek", "Africa", (-22.96, 18.49)),
    Country("NE", "Niger", "Niamey", "Africa", (17.61, 8.08)),
    Country("NG", "Nigeria", "Abuja", "Africa", (9.08, 8.68)),
    Country("RW", "Rwanda", "Kigali", "Africa", (-1.94, 29.87)),
    Country("ST", "Sao Tome and Principe", "Sao Tome", "Africa", (0.19, 6.61)),
    Country("SN", "Senegal", "Dakar", "Africa", (14.5, -14.45)),
    Country("SC", "Seychelles", "Victoria", "Africa", (-4.68, 55.49)),
    Country("SL", "Sierra Leone", "Freetown", "Africa", (8.46, -11.78)),
    Country("SO", "Somalia", "Mogadishu", "Africa", (5.15, 46.2)),
    Country("ZA", "South Africa", "Pretoria", "Africa", (-30.56, 22.94)),
    Country("SS", "South Sudan", "Juba", "Africa", (6.88, 31.31)),
    Country("SD", "Sudan", "Khartoum", "Africa", (12.86, 30.22)),
    Country("TZ", "Tanzania", "Dodoma", "Africa", (-6.37, 34.89)),
    Country("TG", "Togo", "Lome", "Africa", (8.62, 0.82)),
    Country("TN", "Tunisia", "Tunis", "Africa", (33.89, 9.54)),
    Country("UG", "Uganda", "Kampala", "Africa", (1.37, 32.29)),
    Country("ZM", "Zambia", "Lusaka", "Africa", (-13.13, 27.85)),
    Country("ZW", "Zimbabwe", "Harare", "Africa", (-19.02, 29.15)),
    # North America
    Country("AG", "Antigua and Barbuda", "St. John's", "North America", (17.06, -61.8)),
    Country("BS", "Bahamas", "Nassau", "North America", (25.03, -77.4)),
    Country("BB", "Barbados", "Bridgetown", "North America", (13.19, -59.54)),
    Country("BZ", "Belize", "Belmopan", "North America", (17.19, -88.5)),
    Country("CA", "Canada", "Ottawa", "North America", (56.13, -106.35)),
    Country("CR", "Costa Rica", "San Jose", "North America", (9.75, -83.75)),
    Country("CU", "Cuba", "Havana", "North America", (21.52, -77.78)),
    Country("DM", "Dominica", "Roseau", "North America", (15.41, -61.37)),
    Country("DO", "Dominican Republic", "Santo Domingo", "North America", (18.74, -70.16)),
    Country("SV", "El Salvador", "San Salvador", "North America", (13.79, -88.9)),
    Country("GD", "Grenada", "St. George's", "North America", (12.26, -61.6)),
    Country("GT", "Guatemala", "Guatemala City", "North America", (15.78, -90.23)),
    Country("HT", "Haiti", "Port-au-Prince", "North America", (18.97, -72.29)),
    Country("HN", "Honduras", "Tegucigalpa", "North America", (15.2, -86.24)),
    Country("JM", "Jamaica", "Kingston", "North America", (18.11, -77.3)),
    Country("MX", "Mexico", "Mexico City", "North America", (23.63, -102.55)),
    Country("NI", "Nicaragua", "Managua", "North America", (12.87, -85.21)),
    Country("PA", "Panama", "Panama City", "North America", (8.54, -80.78)),
    Country("KN", "Saint Kitts and Nevis", "Basseterre", "North America", (17.36, -62.78)),
    Country("LC", "Saint Lucia", "Castries", "North America", (13.91, -60.98)),
    Country("VC", "Saint Vincent and the Grenadines", "Kingstown", "North America", (12.98, -61.29)),
    Country("TT", "Trinidad and Tobago", "Port of Spain", "North America", (10.69, -61.22)),
    Country("US", "United States", "Washington, D.C.", "North America", (37.09, -95.71)),
    # South America
    Country("AR", "Argentina", "Buenos Aires", "South America", (-38.42, -63.62)),
    Country("BO", "Bolivia", "Sucre", "South America", (-16.29, -63.59)),
    Country("BR", "Brazil", "Brasilia", "South America", (-14.24, -51.93)),
    Country("CL", "Chile", "Santiago", "South America", (-35.68, -71.54)),
    Country("CO", "Colombia", "Bogota", "South America", (4.57, -74.3)),
    Country("EC", "Ecuador", "Quito", "South America", (-1.83, -78.18)),
    Country("GY", "Guyana", "Georgetown", "South America", (4.86, -58.93)),
    Country("PY", "Paraguay", "Asuncion", "South America", (-23.44, -58.44)),
    Country("PE", "Peru", "Lima", "South America", (-9.19, -75.02)),
    Country("SR", "Suriname", "Paramaribo", "South America", (3.92, -56.03)),
    Country("UY", "Uruguay", "Montevideo", "South America", (-32.52, -55.77)),
    Country("VE", "Venezuela", "Caracas", "South America", (6.42, -66.59)),
    Country("GF", "French Guiana", "Cayenne", "South America", (3.93, -53.13)),
    # Oceania
    Country("AU", "Australia", "Canberra", "Oceania", (-25.27, 133.78)),
    Country("FJ", "Fiji", "Suva", "Oceania", (-17.71, 178.07)),
    Country("NZ", "New Zealand", "Wellington", "Oceania", (-40.9, 174.89)),
    Country("PG", "Papua New Guinea", "Port Moresby", "Oceania", (-6.31, 143.96)),
    Country("WS", "Samoa", "Apia", "Oceania", (-13.76, -172.1)),
    Country("SB", "Solomon Islands", "Honiara", "Oceania", (-9.65, 160.16)),
    Country("TO", "Tonga", "Nuku'alofa", "Oceania", (-21.18, -175.2)),
    Country("VU", "Vanuatu", "Port Vila", "Oceania", (-15.38, 166.96)),
)
