# seed dataset used by the bootstrap; keys follow the loading shape
# accepted by RecordStore.bulk_load (numeric strings are normalized)


def _year(first: "int", second: "int") -> "dict[str, int]":
    months = {str(m): 55 for m in range(1, 13)}
    months["1"] = first
    months["2"] = second
    return months


SAMPLE_CUSTOMERS: "dict[str, dict[str, object]]" = {
    "1920": {
        "id": "1920",
        "name": "kaio",
        "usages": {
            "2016": _year(50, 55),
            "2015": _year(70, 63),
        },
    },
    "38673": {
        "id": "38673",
        "name": "Margaret",
        "usages": {
            "2016": _year(52, 66),
            "2015": _year(52, 66),
        },
    },
}
