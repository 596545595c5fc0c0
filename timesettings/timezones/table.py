# This file is part of the SLA firmware
# Copyright (C) 2022 Prusa Research a.s. - www.prusa3d.com
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Time zone display groups

Each row is a tuple of member identifiers and a display label. The first member is the canonical value that is
stored when the group is selected, it must not be listed in any earlier row. Rows are kept in display order.
"""

from typing import Tuple

TIME_ZONE_TABLE: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("UTC",), "(UTC) Coordinated Universal Time"),
    (("Africa/Casablanca",), "(UTC+00:00) Casablanca"),
    (("Europe/London", "Europe/Dublin", "Europe/Lisbon", "GMT"), "(UTC+00:00) Dublin, Edinburgh, Lisbon, London"),
    (("Africa/Monrovia", "Atlantic/Reykjavik"), "(UTC+00:00) Monrovia, Reykjavik"),
    (
        ("Europe/Amsterdam", "Europe/Berlin", "Europe/Rome", "Europe/Stockholm", "Europe/Vienna"),
        "(UTC+01:00) Amsterdam, Berlin, Bern, Rome, Stockholm, Vienna",
    ),
    (
        ("Europe/Budapest", "Europe/Belgrade", "Europe/Bratislava", "Europe/Ljubljana", "Europe/Prague"),
        "(UTC+01:00) Belgrade, Bratislava, Budapest, Ljubljana, Prague",
    ),
    (
        ("CET", "Europe/Brussels", "Europe/Copenhagen", "Europe/Madrid", "Europe/Paris"),
        "(UTC+01:00) Brussels, Copenhagen, Madrid, Paris",
    ),
    (
        ("Europe/Sarajevo", "Europe/Belgrade", "Europe/Skopje", "Europe/Warsaw", "Europe/Zagreb"),
        "(UTC+01:00) Sarajevo, Skopje, Warsaw, Zagreb",
    ),
    (("Africa/Lagos",), "(UTC+01:00) West Central Africa"),
    (("Africa/Windhoek",), "(UTC+01:00) Windhoek"),
    (("Asia/Amman",), "(UTC+02:00) Amman"),
    (("Europe/Athens", "Europe/Bucharest"), "(UTC+02:00) Athens, Bucharest"),
    (("Asia/Beirut",), "(UTC+02:00) Beirut"),
    (("Africa/Cairo",), "(UTC+02:00) Cairo"),
    (("Europe/Chisinau",), "(UTC+02:00) Chisinau"),
    (("Asia/Damascus",), "(UTC+02:00) Damascus"),
    (("Asia/Gaza", "Asia/Hebron"), "(UTC+02:00) Gaza, Hebron"),
    (("Africa/Harare",), "(UTC+02:00) Harare, Pretoria"),
    (
        ("Europe/Helsinki", "Europe/Kyiv", "Europe/Riga", "Europe/Sofia", "Europe/Tallinn", "Europe/Vilnius"),
        "(UTC+02:00) Helsinki, Kyiv, Riga, Sofia, Tallinn, Vilnius",
    ),
    (("Asia/Jerusalem",), "(UTC+02:00) Jerusalem"),
    (("Europe/Kaliningrad",), "(UTC+02:00) Kaliningrad"),
    (("Africa/Tripoli",), "(UTC+02:00) Tripoli"),
    (("Asia/Baghdad",), "(UTC+03:00) Baghdad"),
    (("Europe/Istanbul",), "(UTC+03:00) Istanbul"),
    (("Asia/Riyadh", "Asia/Kuwait"), "(UTC+03:00) Kuwait, Riyadh"),
    (("Europe/Minsk",), "(UTC+03:00) Minsk"),
    (("Europe/Moscow", "Europe/Volgograd"), "(UTC+03:00) Moscow, St. Petersburg, Volgograd"),
    (("Africa/Nairobi",), "(UTC+03:00) Nairobi"),
    (("Asia/Tehran",), "(UTC+03:30) Tehran"),
    (("Asia/Dubai",), "(UTC+04:00) Abu Dhabi, Muscat"),
    (("Europe/Astrakhan", "Europe/Ulyanovsk"), "(UTC+04:00) Astrakhan, Ulyanovsk"),
    (("Asia/Baku",), "(UTC+04:00) Baku"),
    (("Europe/Samara",), "(UTC+04:00) Izhevsk, Samara"),
    (("Indian/Mauritius",), "(UTC+04:00) Port Louis"),
    (("Asia/Tbilisi",), "(UTC+04:00) Tbilisi"),
    (("Asia/Yerevan",), "(UTC+04:00) Yerevan"),
    (("Asia/Kabul",), "(UTC+04:30) Kabul"),
    (("Asia/Ashgabat", "Asia/Tashkent"), "(UTC+05:00) Ashgabat, Tashkent"),
    (("Asia/Yekaterinburg",), "(UTC+05:00) Ekaterinburg"),
    (("Asia/Karachi",), "(UTC+05:00) Islamabad, Karachi"),
    (("Asia/Kolkata",), "(UTC+05:30) Chennai, Kolkata, Mumbai, New Delhi"),
    (("Asia/Colombo",), "(UTC+05:30) Sri Jayawardenepura"),
    (("Asia/Kathmandu",), "(UTC+05:45) Kathmandu"),
    (("Asia/Almaty",), "(UTC+06:00) Astana"),
    (("Asia/Dhaka",), "(UTC+06:00) Dhaka"),
    (("Asia/Omsk",), "(UTC+06:00) Omsk"),
    (("Asia/Yangon", "Asia/Rangoon"), "(UTC+06:30) Yangon (Rangoon)"),
    (("Asia/Bangkok", "Asia/Jakarta"), "(UTC+07:00) Bangkok, Hanoi, Jakarta"),
    (("Asia/Barnaul",), "(UTC+07:00) Barnaul, Gorno-Altaysk"),
    (("Asia/Hovd",), "(UTC+07:00) Hovd"),
    (("Asia/Krasnoyarsk",), "(UTC+07:00) Krasnoyarsk"),
    (("Asia/Novosibirsk",), "(UTC+07:00) Novosibirsk"),
    (("Asia/Tomsk",), "(UTC+07:00) Tomsk"),
    (("Asia/Hong_Kong", "Asia/Chongqing", "Asia/Urumqi"), "(UTC+08:00) Beijing, Chongqing, Hong Kong, Urumqi"),
    (("Asia/Irkutsk",), "(UTC+08:00) Irkutsk"),
    (("Asia/Singapore", "Asia/Kuala_Lumpur"), "(UTC+08:00) Kuala Lumpur, Singapore"),
    (("Australia/Perth",), "(UTC+08:00) Perth"),
    (("Asia/Taipei",), "(UTC+08:00) Taipei"),
    (("Asia/Ulaanbaatar",), "(UTC+08:00) Ulaanbaatar"),
    (("Asia/Pyongyang",), "(UTC+08:30) Pyongyang"),
    (("Australia/Eucla",), "(UTC+08:45) Eucla"),
    (("Asia/Chita",), "(UTC+09:00) Chita"),
    (("Asia/Tokyo",), "(UTC+09:00) Osaka, Sapporo, Tokyo"),
    (("Asia/Seoul",), "(UTC+09:00) Seoul"),
    (("Asia/Yakutsk",), "(UTC+09:00) Yakutsk"),
    (("Australia/Adelaide",), "(UTC+09:30) Adelaide"),
    (("Australia/Darwin",), "(UTC+09:30) Darwin"),
    (("Australia/Brisbane",), "(UTC+10:00) Brisbane"),
    (("Australia/Sydney", "Australia/Canberra", "Australia/Melbourne"), "(UTC+10:00) Canberra, Melbourne, Sydney"),
    (("Pacific/Guam", "Pacific/Port_Moresby"), "(UTC+10:00) Guam, Port Moresby"),
    (("Australia/Hobart",), "(UTC+10:00) Hobart"),
    (("Asia/Vladivostok",), "(UTC+10:00) Vladivostok"),
    (("Australia/Lord_Howe",), "(UTC+10:30) Lord Howe Island"),
    (("Pacific/Bougainville",), "(UTC+11:00) Bougainville Island"),
    (("Asia/Srednekolymsk",), "(UTC+11:00) Chokurdakh"),
    (("Asia/Magadan",), "(UTC+11:00) Magadan"),
    (("Pacific/Norfolk",), "(UTC+11:00) Norfolk Island"),
    (("Asia/Sakhalin",), "(UTC+11:00) Sakhalin"),
    (("Pacific/Noumea",), "(UTC+11:00) Solomon Is., New Caledonia"),
    (("Asia/Anadyr",), "(UTC+12:00) Anadyr, Petropavlovsk-Kamchatsky"),
    (("Pacific/Auckland",), "(UTC+12:00) Auckland, Wellington"),
    (("Pacific/Funafuti",), "(UTC+12:00) Coordinated Universal Time +12"),
    (("Pacific/Fiji",), "(UTC+12:00) Fiji"),
    (("Pacific/Chatham",), "(UTC+12:45) Chatham Islands"),
    (("Pacific/Tongatapu",), "(UTC+13:00) Nuku'alofa"),
    (("Pacific/Apia",), "(UTC+13:00) Samoa"),
    (("Pacific/Kiritimati",), "(UTC+14:00) Kiritimati Island"),
    (("Atlantic/Azores",), "(UTC-01:00) Azores"),
    (("Atlantic/Cape_Verde",), "(UTC-01:00) Cabo Verde Is."),
    (("America/Noronha",), "(UTC-02:00) Coordinated Universal Time -02"),
    (("America/Araguaina",), "(UTC-03:00) Araguaina"),
    (("America/Sao_Paulo",), "(UTC-03:00) Brasilia"),
    (("America/Buenos_Aires", "America/Argentina/Buenos_Aires"), "(UTC-03:00) Buenos Aires"),
    (("America/Cayenne", "America/Fortaleza"), "(UTC-03:00) Cayenne, Fortaleza"),
    (("America/Montevideo",), "(UTC-03:00) Montevideo"),
    (("America/Miquelon",), "(UTC-03:00) Saint Pierre and Miquelon"),
    (("America/St_Johns",), "(UTC-03:30) Newfoundland"),
    (("America/Asuncion",), "(UTC-04:00) Asuncion"),
    (("America/Halifax",), "(UTC-04:00) Atlantic Time (Canada)"),
    (("America/Caracas",), "(UTC-04:00) Caracas"),
    (("America/Cuiaba",), "(UTC-04:00) Cuiaba"),
    (("America/Manaus", "America/Argentina/San_Juan"), "(UTC-04:00) Georgetown, La Paz, Manaus, San Juan"),
    (("America/Godthab",), "(UTC-03:00) Greenland"),
    (("America/Santiago",), "(UTC-04:00) Santiago"),
    (("America/Grand_Turk",), "(UTC-04:00) Turks and Caicos"),
    (("America/Bogota", "America/Lima", "America/Rio_Branco"), "(UTC-05:00) Bogota, Lima, Quito, Rio Branco"),
    (("America/Cancun",), "(UTC-05:00) Chetumal"),
    (("Canada/Eastern",), "(UTC-05:00) Eastern Time (US & Canada)"),
    (("America/Port-au-Prince",), "(UTC-05:00) Haiti"),
    (("America/Havana",), "(UTC-05:00) Havana"),
    (("America/Indiana/Indianapolis",), "(UTC-05:00) Indiana (East)"),
    (("America/Chicago",), "(UTC-06:00) Central America"),
    (("America/Winnipeg",), "(UTC-06:00) Central Time (US & Canada)"),
    (("Pacific/Easter",), "(UTC-06:00) Easter Island"),
    (("America/Mexico_City",), "(UTC-06:00) Guadalajara, Mexico City, Monterrey"),
    (("America/Regina",), "(UTC-06:00) Saskatchewan"),
    (("America/Phoenix",), "(UTC-07:00) Arizona"),
    (("America/Chihuahua", "America/Mazatlan"), "(UTC-07:00) Chihuahua, La Paz, Mazatlan"),
    (("America/Edmonton",), "(UTC-07:00) Mountain Time (US & Canada)"),
    (("America/Tijuana",), "(UTC-08:00) Baja California"),
    (("Pacific/Pitcairn",), "(UTC-08:00) Coordinated Universal Time-08"),
    (("America/Vancouver",), "(UTC-08:00) Pacific Time (US & Canada)"),
    (("America/Anchorage",), "(UTC-09:00) Alaska"),
    (("Pacific/Gambier",), "(UTC-09:00) Coordinated Universal Time-09"),
    (("Pacific/Marquesas",), "(UTC-09:30) Marquesas Islands"),
    (("America/Adak",), "(UTC-10:00) Aleutian Islands"),
    (("Pacific/Honolulu",), "(UTC-10:00) Hawaii"),
    (("Pacific/Pago_Pago",), "(UTC-11:00) Coordinated Universal Time -11"),
)
