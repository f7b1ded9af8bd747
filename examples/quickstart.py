"""Quickstart example for cldrforge.

Derives currency lists, localized region names, number constants and list
patterns from a tiny in-memory dataset, then routes a few locale requests
through the generated dispatch tables.

Region sort orders normally use ICU collation (pip install cldrforge[icu]);
this example injects a case-insensitive key so it runs without PyICU.

Python 3.13+.
"""

from __future__ import annotations

import logging

from cldrforge import (
    CurrencyListDeriver,
    CurrencyRecord,
    DefaultCurrencyResolver,
    GenerationConfig,
    InMemoryLocaleDataSource,
    InMemoryRegionLanguageSource,
    ListPatternsDeriver,
    LocaleKey,
    LocalizedNamesDeriver,
    MalformedDescriptorError,
    NumberConstantsDeriver,
    generate,
    to_global_currency_pattern,
)
from cldrforge.currency import InMemoryCurrencyOverlaySource
from cldrforge.regions import RegionPopulation

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

SOURCE = InMemoryLocaleDataSource(
    {
        "currency": {
            "en": {"USD": "US Dollar|$|2", "GBP": "British Pound|£|2", "EUR": "Euro|€|2"},
            "en_GB": {"USD": "US Dollar|US$|2"},
            "fr": {"EUR": "euro|€|2", "USD": "dollar des États-Unis|$US|2"},
        },
        "territory": {
            "en": {"US": "United States", "GB": "United Kingdom", "FR": "France"},
            "fr": {"US": "États-Unis", "GB": "Royaume-Uni", "FR": "France"},
        },
        "numberConstants": {
            "en": {"decimal": ".", "group": ",", "currencyPattern": "¤#,##0.00;(¤#,##0.00)"},
            "fr": {"decimal": ",", "group": " ", "currencyPattern": "#,##0.00 ¤"},
        },
        "list": {
            "en": {"2": "{0} and {1}", "start": "{0}, {1}", "middle": "{0}, {1}", "end": "{0}, and {1}"},
            "fr": {"2": "{0} et {1}", "start": "{0}, {1}", "middle": "{0}, {1}", "end": "{0} et {1}"},
        },
    },
    locales=["en_US", "fr_FR"],
)

REGIONS = InMemoryRegionLanguageSource(
    {
        "en": [
            RegionPopulation("US", "United States", 290_000_000),
            RegionPopulation("GB", "United Kingdom", 60_000_000),
        ],
        "fr": [RegionPopulation("FR", "France", 60_000_000)],
    }
)

RESOLVER = DefaultCurrencyResolver(
    {"US": "USD", "GB": "GBP", "FR": "EUR"},
    REGIONS.most_populated_regions(),
)

# Example 1: Currency descriptors
print("=" * 50)
print("Example 1: Currency Descriptors")
print("=" * 50)

record = CurrencyRecord.from_descriptors("USD", "US Dollar|$|2", "US$|SymPrefix")
print(record.to_compact())
# Output: ('USD', '$', 258, 'US$', '$')
print(record.to_json())
# Output: [ "USD", "$", 258, "US$", "$"]

try:
    CurrencyRecord.from_descriptors("USD", "US Dollar|$|two")
except MalformedDescriptorError as error:
    print(error)

# Example 2: Global currency patterns
print("\n" + "=" * 50)
print("Example 2: Global Currency Patterns")
print("=" * 50)

print(to_global_currency_pattern("¤#,##0.00;(¤#,##0.00)"))
# Output: ¤#,##0.00 ¤¤;(¤#,##0.00) ¤¤
print(to_global_currency_pattern("#,##0.00 '¤;x'"))
# Output: #,##0.00 '¤;x' ¤¤

# Example 3: Running every deriver
print("\n" + "=" * 50)
print("Example 3: Generation Run")
print("=" * 50)

config = GenerationConfig(max_workers=4)
result = generate(
    [
        CurrencyListDeriver(
            SOURCE, RESOLVER, InMemoryCurrencyOverlaySource({"en": {"USD": "US$"}}), config
        ),
        LocalizedNamesDeriver(
            SOURCE, REGIONS, config, collation_key=lambda _locale: str.casefold
        ),
        NumberConstantsDeriver(SOURCE, RESOLVER, config),
        ListPatternsDeriver(SOURCE, config),
    ],
    config=config,
)

for family_result in result:
    tags = ", ".join(str(locale) for locale in family_result.variants)
    print(f"{family_result.family}: {tags}")

# Example 4: Dispatch
print("\n" + "=" * 50)
print("Example 4: Routing Locale Requests")
print("=" * 50)

currencies = result["CurrencyList"]
for request in ("en_AU", "en-GB", "fr_CA", "de", "default"):
    print(f"{request:8} -> {currencies.dispatch.lookup(request)}")

names = result["LocalizedNames"].variants[LocaleKey.parse("fr")]
print(f"fr sort order:   {names.sort_order}")  # type: ignore[attr-defined]
print(f"fr likely order: {names.likely_order}")  # type: ignore[attr-defined]

lists = result["ListPatterns"].variant_for("fr_FR")
print(lists.format(["rouge", "vert", "bleu"]))  # type: ignore[union-attr]
# Output: rouge, vert et bleu
