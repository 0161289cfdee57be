import logging
import re
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

REWARDSTYLE_SHORTCODE_RE = re.compile(r'\[show_shopthepost_widget id=[\'",]+[0-9]+[\'",]\]', re.IGNORECASE)
REWARDSTYLE_WIDGET_ID_RE = re.compile(r'data-widget-id=([\'",]+[0-9]+[\'",])', re.IGNORECASE)
SHOPBOP_SHORTCODE_RE = re.compile(r'\[show_lookbook_widget id=[\'",]+[0-9]+[\'",]\]', re.IGNORECASE)


class ShopService:
    def get_rewardstyle_shortcode(self, content):
        """RewardStyle shortcode in content, rebuilt from a data-widget-id when only the embed is present."""
        content = content or ''
        match = REWARDSTYLE_SHORTCODE_RE.search(content)
        if match:
            return match.group(0)
        match = REWARDSTYLE_WIDGET_ID_RE.search(content)
        if match:
            return f'[show_shopthepost_widget id={match.group(1)}]'
        return None

    def get_shopbop_code(self, content):
        match = SHOPBOP_SHORTCODE_RE.search(content or '')
        return match.group(0) if match else None

    def get_shopstyle_code(self, content):
        """Outer HTML of the first ShopStyle widget div."""
        if not content:
            return None
        try:
            soup = BeautifulSoup(content, 'lxml')
            widget = (
                soup.find('div', class_='shopsense-widget')
                or soup.find('div', attrs={'data-sc-widget-id': True})
            )
        except Exception as e:
            logger.debug(f"ShopStyle lookup failed: {e}")
            return None
        return str(widget) if widget else None

    def get_post_shop(self, content, acf_shop=None):
        """First shop found: custom field value, then RewardStyle, ShopStyle and Shopbop."""
        if acf_shop:
            return acf_shop
        for finder in (self.get_rewardstyle_shortcode, self.get_shopstyle_code, self.get_shopbop_code):
            code = finder(content)
            if code:
                logger.debug(f"Shop found by {finder.__name__}")
                return code
        return None
