"""返金申請フォームのページ配信。"""
