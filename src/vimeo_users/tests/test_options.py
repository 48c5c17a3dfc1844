from unittest import TestCase

from vimeo_users.options import UNSET, ListUserOptions, UserRequest


class UserRequestTests(TestCase):
    def test_nothing_given(self):
        self.assertEqual(UserRequest().as_data(), {})

    def test_only_given_fields(self):
        request = UserRequest(name="Jane", content_filter=["language"])

        self.assertEqual(
            request.as_data(), {"name": "Jane", "content_filter": ["language"]}
        )

    def test_clearing_is_not_omitting(self):
        request = UserRequest(bio=None, location="")

        self.assertEqual(request.as_data(), {"bio": None, "location": ""})


class UnsetTests(TestCase):
    def test_unset_is_falsy_singleton(self):
        self.assertFalse(UNSET)
        self.assertIs(type(UNSET)(), UNSET)
        self.assertEqual(repr(UNSET), "UNSET")

    def test_list_options_defaults(self):
        options = ListUserOptions()

        self.assertIsNone(options.page)
        self.assertEqual(options.fields, [])
