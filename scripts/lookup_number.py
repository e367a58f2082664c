import sys
from E164Lookup import (
    LookupStatus,
    lookup_number,
    iso3166_to_e164_country_code,
    country_name,
)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("Usage: lookup_number.py <PHONE|ALPHA2>")
        return 1
    code = argv[0].strip()
    if code.isalpha():
        calling_code = iso3166_to_e164_country_code(code)
        if calling_code is None:
            print(f"country: {code}\ncalling code: not found")
            return 1
        print(f"country: {code} ({country_name(code)})\ncalling code: {calling_code}")
        return 0
    result = lookup_number(code)
    if result.status is not LookupStatus.FOUND:
        print(f"number: {code}\ncountry: not found ({result.status.value})")
        return 1
    print(f"number: {code}\ncountry: {result.country} ({country_name(result.country)})\nprefix: {result.prefix}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
