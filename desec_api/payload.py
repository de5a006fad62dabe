#
#
#


class Payload(dict):
    """JSON object that only carries the fields that were supplied.

    Insertion order is kept so the serialized body matches the order in
    which fields were set.
    """

    def set(self, key, value):
        if value is not None:
            self[key] = value
        return self

    def set_always(self, key, value):
        self[key] = value
        return self
