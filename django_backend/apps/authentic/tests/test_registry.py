"""
Test cases for the registration site and model mixin.
"""

from unittest.mock import Mock

from django.test import SimpleTestCase

from apps.authentic.exceptions import NotRegistered
from apps.authentic.registry import AuthenticSite, acts_as_authentic, site
from apps.authentic.signals import model_configured

from .models import Account, FeedReader, Member, User


class DefaultSiteTestCase(SimpleTestCase):
    """Test models registered with the decorator on the default site."""

    def test_decorated_models_are_registered(self):
        for model in (User, Account, Member):
            with self.subTest(model=model.__name__):
                self.assertTrue(site.is_registered(model))
        self.assertFalse(site.is_registered(FeedReader))

    def test_user_config(self):
        config = site.get_config(User)

        self.assertEqual(config.session_class, 'UserSession')
        self.assertEqual(config.login_field, 'username')
        self.assertEqual(config.crypted_password_field, 'password_hash')
        self.assertEqual(config.password_salt_field, 'pw_salt')
        self.assertEqual(config.remember_token_field, 'remember_key')
        self.assertIsNone(config.single_access_token_field)

    def test_account_config(self):
        config = site.get_config(Account)

        self.assertEqual(config.login_field, 'email')
        self.assertEqual(config.login_field_type, 'email')
        self.assertEqual(config.crypted_password_field, 'crypted_password')

    def test_mixin_accessor(self):
        config = Member.get_authentic_config()

        self.assertIs(config, site.get_config(Member))
        self.assertEqual(config.login_field, 'login')
        self.assertEqual(config.single_access_token_field, 'single_access_token')
        self.assertEqual(config.logged_in_timeout, 1200)
        self.assertEqual(list(config.session_ids), [None, 'admin'])

    def test_mixin_accessor_on_unregistered_model(self):
        with self.assertRaises(NotRegistered):
            FeedReader.get_authentic_config()

    def test_registered_models_sorted_by_label(self):
        labels = [model._meta.label for model in site.registered_models()]
        self.assertEqual(labels, sorted(labels))


class AuthenticSiteTestCase(SimpleTestCase):
    """Test registration on a dedicated site."""

    def setUp(self):
        self.site = AuthenticSite(name='test')

    def test_resolve_does_not_register(self):
        config = self.site.resolve(FeedReader)

        self.assertFalse(self.site.is_registered(FeedReader))
        self.assertEqual(config.session_class, 'FeedReaderSession')
        self.assertEqual(config.login_field, 'login')
        self.assertEqual(config.crypted_password_field, 'pw_hash')
        self.assertEqual(config.password_salt_field, 'password_salt')
        self.assertEqual(config.remember_token_field, 'cookie_key')
        self.assertEqual(config.single_access_token_field, 'feeds_token')

    def test_register_publishes_config(self):
        config = self.site.register(FeedReader, login_field='nickname')

        self.assertTrue(self.site.is_registered(FeedReader))
        self.assertIs(self.site.get_config(FeedReader), config)
        self.assertEqual(config.login_field, 'nickname')
        self.assertFalse(site.is_registered(FeedReader))

    def test_register_again_replaces_config(self):
        first = self.site.register(FeedReader)
        with self.assertLogs('apps.authentic.registry', level='INFO'):
            second = self.site.register(FeedReader, logged_in_timeout=60)

        self.assertIsNot(first, second)
        self.assertEqual(self.site.get_config(FeedReader).logged_in_timeout, 60)

    def test_registration_steps_receive_resolved_config(self):
        calls = []

        @self.site.add_registration_step
        def record(model, config):
            calls.append((model, config, self.site.is_registered(model)))

        config = self.site.register(FeedReader)

        self.assertEqual(calls, [(FeedReader, config, True)])

    def test_registration_steps_run_in_order(self):
        order = []
        pipeline_site = AuthenticSite(
            registration_steps=[
                lambda model, config: order.append('first'),
                lambda model, config: order.append('second'),
            ]
        )

        pipeline_site.register(FeedReader)

        self.assertEqual(order, ['first', 'second'])

    def test_model_configured_signal(self):
        handler = Mock()
        model_configured.connect(handler, weak=False)
        self.addCleanup(model_configured.disconnect, handler)

        config = self.site.register(FeedReader)

        handler.assert_called_once()
        kwargs = handler.call_args.kwargs
        self.assertIs(kwargs['sender'], FeedReader)
        self.assertIs(kwargs['config'], config)
        self.assertIs(kwargs['site'], self.site)

    def test_get_config_of_unregistered_model(self):
        with self.assertRaises(NotRegistered) as ctx:
            self.site.get_config(FeedReader)

        self.assertEqual(ctx.exception.code, 'not_registered')
        self.assertEqual(ctx.exception.details, {'model': 'authentic.FeedReader'})

    def test_unregister(self):
        self.site.register(FeedReader)
        self.site.unregister(FeedReader)

        self.assertFalse(self.site.is_registered(FeedReader))
        with self.assertRaises(NotRegistered):
            self.site.unregister(FeedReader)

    def test_decorator_with_site(self):
        decorated = acts_as_authentic(site=self.site, session_ids=['feeds'])(FeedReader)

        self.assertIs(decorated, FeedReader)
        self.assertEqual(list(self.site.get_config(FeedReader).session_ids), ['feeds'])
